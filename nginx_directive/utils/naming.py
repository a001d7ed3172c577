"""
Directive name normalization.

Directive names are compared in their canonical snake_case form, so
``serverName``, ``server_name`` and ``Server Name`` all refer to the
same directive.
"""


def snake_case(token: str) -> str:
    """
    Convert a name token to its canonical lowercase, underscore-separated form.

    Whitespace is always removed. Tokens that are then lowercase are
    returned as they are; otherwise an underscore is inserted before every
    uppercase character that follows a non-uppercase one, and the result
    is lowercased.

    Examples:
        snake_case("server_name")  -> "server_name"
        snake_case("serverName")   -> "server_name"
        snake_case("Server Name")  -> "server_name"
        snake_case("server name")  -> "servername"
        snake_case("HTTPServer")   -> "httpserver"

    Args:
        token: Name to normalize

    Returns:
        Canonical name
    """
    token = "".join(token.split())
    if token.islower():
        return token

    chars: list[str] = []
    previous = ""

    for char in token:
        if char.isupper() and previous and not previous.isupper():
            chars.append("_")
        chars.append(char)
        previous = char

    return "".join(chars).lower()
