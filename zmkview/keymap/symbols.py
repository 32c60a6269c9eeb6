"""Display symbols for ZMK key codes."""

from types import MappingProxyType


ZMK_KEY_LABELS = MappingProxyType(
    {
        "TAB": "⇥",
        "BSPC": "⌫",
        "DEL": "⌦",
        "ESC": "⎋",
        "RET": "⏎",
        "ENTER": "⏎",
        "SPACE": "␣",
        "LSHIFT": "⇧",
        "RSHIFT": "⇧",
        "LCTRL": "⌃",
        "RCTRL": "⌃",
        "LALT": "⌥",
        "RALT": "⌥",
        "LGUI": "⌘",
        "RGUI": "⌘",
        "CAPS": "⇪",
        "CAPSLOCK": "⇪",
        "UP": "↑",
        "DOWN": "↓",
        "LEFT": "←",
        "RIGHT": "→",
        "HOME": "⇱",
        "END": "⇲",
        "PGUP": "⇞",
        "PGDN": "⇟",
        # Punctuation
        "SEMI": ";",
        "SQT": "'",
        "GRAVE": "`",
        "COMMA": ",",
        "DOT": ".",
        "FSLH": "/",
        "BSLH": "\\",
        "LBKT": "[",
        "RBKT": "]",
        "LBRC": "{",
        "RBRC": "}",
        "LPAR": "(",
        "RPAR": ")",
        "MINUS": "-",
        "EQUAL": "=",
        "PLUS": "+",
        "UNDER": "_",
        "EXCL": "!",
        "AT": "@",
        "HASH": "#",
        "DLLR": "$",
        "PRCNT": "%",
        "CARET": "^",
        "AMPS": "&",
        "STAR": "*",
        "KP_MULTIPLY": "*",
        "PIPE": "|",
        "TILDE": "~",
    }
)
