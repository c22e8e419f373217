from pathlib import Path

PROJECT_ROOT = Path(__file__).parent
CONFIG_FILE = "data/default_config.json"

WORD_LENGTH = 5
MAX_GUESSES = 6

GREEN = 2
YELLOW = 1
GRAY = 0

### WORD LISTS ###
ANSWERS_FILE = "data/answers.txt"
ANSWERS_URL = "https://gist.github.com/cfreshman/a03ef2cba789d8cf00c08f767e0fad7b/raw/c46f451920d5cf6326d550fb2d6abb1642717852/wordle-answers-alphabetical.txt"
VALID_GUESSES_FILE = "data/valid_guesses.txt"
VALID_GUESSES_URL = "https://gist.github.com/dracos/dd0668f281e685bad51479e5acaadb93/raw/6bfa15d263d6d5b63840a8e5b64e04b382fdb079/valid-wordle-words.txt"

### PERSISTENCE ###
STORAGE_FILE = "~/.wordget/storage.json"
STATE_KEY = "wordget-state"
STATS_KEY = "wordget-stats"
LAST_ROUND_KEY = "wordget-last-completed-round"

### POLICIES ###
HARD_MODE_POLICIES = ("revealed_counts", "target_counts")
STREAK_POLICIES = ("calendar", "simple")
WORD_HASH_NAMES = ("mulberry32", "browser")

### MESSAGES ###
MSG_NOT_IN_DICTIONARY = "Word not in dictionary!"
MSG_HARD_MODE = "Guess must include all revealed letters in correct positions!"
MSG_WRONG_LENGTH = "Guess must be {length} letters long!"
MSG_WON = "Congratulations! You won!"
MSG_LOST = "Game over! The word was: {word}"

# (type1, type2, ..., required_value [optional])
REQUIRED_SCHEMA = {
    'answers': {
        'savefile': (str,),
        'url': (str, type(None)),
        'refetch': (bool,),
        'save': (bool,),
    },
    'guesses': {
        'savefile': (str,),
        'url': (str, type(None)),
        'refetch': (bool,),
        'save': (bool,),
    },
    'storage': {
        'path': (str, type(None)),
    },
    'game': {
        'hard_mode': (bool,),
        'hard_mode_policy': (str,),
        'streak_policy': (str,),
        'word_hash': (str,),
    },
}

KEYBOARD_ROWS = ("qwertyuiop", "asdfghjkl", "zxcvbnm")

APP_COLORS = {
    'gradient-start'        : '#4795de',
    'gradient-end'          : '#bb637a',
    'tile-green'            : '#16ac55',
    'tile-yellow'           : '#bbaf30',
    'tile-gray'             : '#3a3a3c',
    'tile-empty'            : '#121213',
    'tile-border'           : '#565758',
    'key-default'           : '#818384',
    'screen-background'     : '#121213',
    'standard-gray'         : '#808080',
    'widget-dark'           : '#202020',
}
