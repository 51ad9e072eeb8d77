"""HTTP method tokens recognised as method file names.

``GET.py``, ``post.py`` and ``Delete.py`` are method files; ``utils.py``
and ``GET.txt`` are not.  Parsing happens once, at discovery time.
"""

from enum import StrEnum
from pathlib import PurePath


class HttpMethod(StrEnum):
    """The five methods a method file can implement.

    Values are the lowercase names used for router registration and for
    the handler function looked up inside the file (``get`` in ``GET.py``).
    """

    GET = "get"
    POST = "post"
    PUT = "put"
    PATCH = "patch"
    DELETE = "delete"

    @property
    def label(self) -> str:
        """Uppercase name for diagnostics (``GET``)."""
        return self.name


def parse_method_file(name: str, extensions: tuple[str, ...]) -> HttpMethod | None:
    """Return the method a file name implements, or None for other files.

    The method token is matched case-insensitively; the extension must be one
    of *extensions* (compared lowercase).

    >>> parse_method_file("GET.py", (".py",))
    <HttpMethod.GET: 'get'>
    >>> parse_method_file("get.html", (".py",)) is None
    True
    """
    pure = PurePath(name)
    if pure.suffix.lower() not in extensions:
        return None
    try:
        return HttpMethod(pure.stem.lower())
    except ValueError:
        return None
