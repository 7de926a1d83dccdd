"""Fixed vocabulary shared by the prompt builders and the response coercer."""

# Propriedades pedidas ao modelo, na ordem em que aparecem no bloco JSON
NPC_FIELDS = [
    "name",
    "role",
    "race",
    "occupation",
    "location",
    "motivation",
    "relationships",
    "appearance",
    "personality",
    "abilities",
    "memorableTrait",
    "threatLevel",
    "strength",
    "dexterity",
    "constitution",
    "intelligence",
    "wisdom",
    "charisma",
    "healthPoints",
    "specialAbilities",
    "plotHooks",
    "notes",
]

# The npcs table only requires a name
NPC_REQUIRED_FIELDS = ["name"]

NPC_ROLES = ["aliado", "vilão", "neutro", "obstáculo"]

THREAT_LEVELS = ["Inofensivo", "Desafiador", "Perigoso", "Chefe"]

ABILITY_SCORE_RANGE = (3, 20)

# Prefixo usado ao dobrar "relationships" dentro de "notes"
RELATIONSHIPS_LABEL = "Relações"

MAP_REQUIRED_ELEMENTS = [
    "um título com o nome da campanha",
    "geografia detalhada (montanhas, rios, florestas, mares)",
    "marcadores para cidades e locais importantes",
    "uma rosa dos ventos",
    "bordas decorativas",
    "estilo artístico de mapa visto de cima (top-down)",
]

DEFAULT_MAP_STYLE = "mapa de fantasia clássico desenhado à mão, em pergaminho envelhecido"
