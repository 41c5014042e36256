from rich.console import Console
from rich.theme import Theme

from pokeworld.models.models import ItemKind

THEME = Theme(
    {
        "logging.level.debug": "dim white",
        "logging.level.info": "white",
        "logging.level.warning": "yellow",
        "logging.level.error": "red",
        "logging.level.critical": "bold bright_red",
    },
)
CONSOLE = Console(theme=THEME)
LOG_FILE_LIMIT = 20

CATALOG_ID_MIN = 1
CATALOG_ID_MAX = 151
CREATURE_OFFSET_SPREAD = 0.005
TRAINER_OFFSET_SPREAD = 0.0075
METERS_PER_DEGREE = 111000
TRAINER_LEVEL_MIN = 10
TRAINER_LEVEL_MAX = 29
TRAINER_REWARD_MIN = 200
TRAINER_REWARD_MAX = 699

CAPTURE_RATES = {
    ItemKind.BASIC: 0.40,
    ItemKind.GREAT: 0.60,
    ItemKind.ULTRA: 0.80,
}
PLAYER_DAMAGE_MIN = 20
PLAYER_DAMAGE_MAX = 49
OPPONENT_DAMAGE_MIN = 15
OPPONENT_DAMAGE_MAX = 39

DEFAULT_LATITUDE = -33.0246
DEFAULT_LONGITUDE = -71.5518
DEFAULT_CREATURE_COUNT = 5
DEFAULT_TRAINER_COUNT = 3
DEFAULT_TRAINER_NAMES = ("Ash", "Misty", "Brock", "Gary", "May", "Dawn")
DEFAULT_STARTING_CURRENCY = 1000
DEFAULT_STARTING_INVENTORY = {ItemKind.BASIC: 5, ItemKind.GREAT: 0, ItemKind.ULTRA: 0}
DEFAULT_SHOP_PRICES = {ItemKind.BASIC: 100, ItemKind.GREAT: 300, ItemKind.ULTRA: 600}
DEFAULT_COUNTER_ATTACK_DELAY = 1.5
DEFAULT_DEFEAT_TEARDOWN_DELAY = 2.0
DEFAULT_NOTIFICATION_DURATION = 3.0
DEFAULT_CATALOG_URL = "https://pokeapi.co/api/v2/pokemon/"
DEFAULT_CATALOG_TIMEOUT = 10.0
DEFAULT_LOCATION_URL = "http://ip-api.com/json/"
DEFAULT_LOCATION_TIMEOUT = 5.0

ITEM_DISPLAY_NAMES = {
    ItemKind.BASIC: "Poké Ball",
    ItemKind.GREAT: "Great Ball",
    ItemKind.ULTRA: "Ultra Ball",
}

MSG_BATTLE_DEFEAT = "You lost the battle!"
MSG_BATTLE_VICTORY = "You won ${reward}!"
MSG_CAPTURE_FAILURE = "{name} broke free!"
MSG_CAPTURE_SUCCESS = "You caught {name}!"
MSG_INSUFFICIENT_FUNDS = "You don't have enough money!"
MSG_NO_ACTIVE_BATTLE = "You are not in a battle."
MSG_NO_ACTIVE_CAPTURE = "There is nothing to catch."
MSG_OUT_OF_STOCK = "You don't have any {item} left!"
MSG_PURCHASE_SUCCESS = "You bought 1 {item}!"

MAIN_WINDOW_TITLE = "PokeWorld"

BUTTON_ATTACK = "Attack"
BUTTON_COLLECTION = "Collection"
BUTTON_FLEE = "Run away"
BUTTON_MAP = "Map"
BUTTON_RECENTER = "Recenter"
BUTTON_REFRESH = "Look around"
BUTTON_SHOP = "Shop"

LABEL_COLLECTION_EMPTY = "You haven't caught anything yet. Go explore!"
LABEL_LOCATION = "You are at {location}"
LABEL_NEARBY_CREATURES = "Nearby Pokemon"
LABEL_NEARBY_TRAINERS = "Trainers"
LABEL_OPPONENT_TURN = "Opponent's turn..."
LABEL_PLAYER = "You"
LABEL_SHOP_TITLE = "Shop"
LABEL_WILD_APPEARED = "A wild {name} appeared!"

STYLE_SHEET_NOTIFICATION = "#notification-label { background: #388e3c; border-radius: 4px; padding: 6px; }"
OBJECT_NAME_NOTIFICATION = "notification-label"
SPACING = 5
