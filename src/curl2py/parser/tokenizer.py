"""Shell-like tokenizer for normalised cURL commands.

Handles single and double quotes plus backslash escapes. Pipes, globs,
variable expansion and command sequences are not interpreted.
"""

QUOTES = ("'", '"')


def tokenize(command: str) -> list[str]:
    """Split a normalised command into tokens.

    A backslash makes the next character literal, inside quotes too.
    A quote of the other kind inside an open quote is kept as text.
    Only unquoted spaces separate tokens, and empty tokens are dropped.
    """
    tokens: list[str] = []
    current = ""
    quote: str | None = None
    escape = False

    for char in command:
        if escape:
            current += char
            escape = False
        elif char == "\\":
            escape = True
        elif char in QUOTES:
            if quote is None:
                quote = char
            elif quote == char:
                quote = None
            else:
                current += char
        elif char == " " and quote is None:
            if current:
                tokens.append(current)
                current = ""
        else:
            current += char

    if current:
        tokens.append(current)
    return tokens
