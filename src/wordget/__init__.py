# all convenience imports from backend
from .backend.core import (
    WordgetGame, Round, GameStatus
)
from .backend.helpers import (
    Classification,
    get_pattern,
    score,
    pattern_to_str,
    get_words,
    load_word_lists
)
from .backend.messenger import (
    UIMessenger, ConsoleMessenger, TextualMessenger
)
from .backend.selector import (
    mulberry32, browser_mulberry32, date_seed, game_seed, select_index, select_word
)
from .backend.stats import (
    Stats, record_result
)
from .backend.storage import (
    KeyValueStore, MemoryStore, JsonFileStore
)
from .backend.validator import (
    GuessRejected, GuessLengthError, InvalidWordError, HardModeError,
    validate_guess, check_hard_mode, confirmed_letter_counts
)
from .config_loader import (
    ConfigError, load_config, get_abs_path
)

__version__ = "0.1.0"
