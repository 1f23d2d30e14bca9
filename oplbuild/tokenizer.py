"""Permissive CSV line tokenizer for OPL exports."""

QUOTE_CHARS = ('"', "'")


def parse_csv_line(line: str) -> list[str]:
    """
    Split one CSV line into trimmed fields.

    Single and double quotes toggle a quoted span and are dropped from the
    output. Commas inside a quoted span are kept as field content. An
    unbalanced quote never raises; the last field is emitted as-is.

    Example:
        parse_csv_line('a,"b,c",d')  # ['a', 'b,c', 'd']
    """
    fields = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char in QUOTE_CHARS:
            in_quotes = not in_quotes
            continue
        if char == ',' and not in_quotes:
            fields.append(''.join(current).strip())
            current = []
            continue
        current.append(char)

    fields.append(''.join(current).strip())
    return fields
