"""
RPG Campaign Agent - Main Entry Point
=====================================
Interactive generator for NPCs, creatures and campaign world maps.
"""

import json
import logging
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from rpg_campaign_agent.config.settings import AGENT_CONFIG
from rpg_campaign_agent.core import (
    EntityGenerator,
    EntityKind,
    GenerationError,
    GenerationOptions,
    MapLocation,
    MapOptions,
    WorldMapGenerator,
)
from rpg_campaign_agent.data.llm_client import create_llm_client
from rpg_campaign_agent.data.storage_adapter import get_storage_adapter


def print_banner():
    """Print the start-up banner."""
    banner = """
    ╔════════════════════════════════════════════════════════════╗
    ║               🐉 RPG Campaign Agent                        ║
    ║        NPCs, criaturas e mapas gerados por IA              ║
    ╚════════════════════════════════════════════════════════════╝
    """
    print(banner)


def ask(label: str) -> str:
    return input(f"  {label}: ").strip()


def read_entity_options(kind: EntityKind) -> GenerationOptions:
    print("\n📝 Deixe em branco para ignorar um campo.")
    return GenerationOptions(
        kind=kind,
        campaign_theme=ask("Tema da campanha") or None,
        level=ask("Nível / desafio") or None,
        terrain=ask("Terreno") or None,
        style=ask("Estilo") or None,
    )


def read_map_options() -> MapOptions:
    print("\n📝 Deixe em branco para ignorar um campo.")
    name = ""
    while not name:
        name = ask("Nome da campanha (obrigatório)")

    options = MapOptions(
        campaign_name=name,
        central_concept=ask("Conceito central") or None,
        geography=ask("Geografia") or None,
        factions=ask("Facções") or None,
        history=ask("História") or None,
        magic_tech=ask("Magia / tecnologia") or None,
        style=ask("Estilo visual") or None,
    )

    print("  Locais (nome vazio para terminar):")
    while True:
        loc_name = ask("  Nome do local")
        if not loc_name:
            break
        options.locations.append(MapLocation(name=loc_name, description=ask("  Descrição")))
    return options


def main():
    """Main function."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    print_banner()

    try:
        client = create_llm_client(AGENT_CONFIG["llm"])
    except ValueError as exc:
        print(f"❌ {exc}")
        sys.exit(1)

    print("1. Gerar NPC")
    print("2. Gerar criatura")
    print("3. Gerar mapa do mundo")
    choice = input("Escolha (1-3): ").strip()

    try:
        if choice in ("1", "2"):
            kind = EntityKind.NPC if choice == "1" else EntityKind.CREATURE
            options = read_entity_options(kind)
            print("\n✨ Gerando...")
            entity = EntityGenerator(client, AGENT_CONFIG["llm"]).generate(options)
            print(json.dumps(entity, ensure_ascii=False, indent=2))
        elif choice == "3":
            options = read_map_options()
            print("\n🗺️ Gerando mapa, isso pode levar alguns segundos...")
            generator = WorldMapGenerator(client, get_storage_adapter(AGENT_CONFIG["storage"]))
            map_path = generator.generate(options)
            print(f"✅ Mapa salvo: {map_path}")
        else:
            print("❌ Opção inválida")
            sys.exit(1)
    except GenerationError as exc:
        print(f"❌ {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
