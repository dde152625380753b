# ---------------------------------------------------------------------
# TEXT UTILITIES
# ---------------------------------------------------------------------
# Helpers the keyboard host uses to decide what to ask the engine.


def get_current_token(text):
    """Get the word currently being typed"""
    if not text or text[-1].isspace():
        return ""
    return text.split()[-1]


def replace_current_token(text, replacement):
    """Swap the word being typed for a completion, leaving a trailing space"""
    token = get_current_token(text)
    if token:
        text = text[:len(text) - len(token)]
    return text + replacement + " "


def last_committed_word(text):
    """
    The word just finished by a space or newline, or "" if the cursor is
    still inside a word. Only the first whitespace after a word counts,
    so a second space does not commit the same word again.
    """
    if len(text) < 2 or not text[-1].isspace() or text[-2].isspace():
        return ""
    return text.split()[-1]


def replace_last_character(text, replacement):
    """Used by the accent keys, which rewrite the letter just typed"""
    if not text:
        return replacement
    return text[:-1] + replacement
