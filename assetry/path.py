import re

from assetry.errors import InvalidIdentifier

_namespace_separator_regex = re.compile(r'::|\\|\.')
_scheme_regex = re.compile(r'^[a-z][a-z0-9+.-]*:(?!:)', re.IGNORECASE)
_whitespace_regex = re.compile(r'\s')


def is_literal(location):
    """
    Is `location` a literal url or path? Anything with a slash or a scheme (`https:`, `data:`, ...) is
    taken as is, everything else is a symbolic identifier like `app.pages.Checkout`.
    """
    return '/' in location or bool(_scheme_regex.match(location))


def resolve(name, extension=None):
    # language=rst
    """
    Resolve the symbolic identifier `name` to a path relative to a resource root.

    The namespace separators `.`, `\\` and `::` all become `/`, and `.extension` is added
    unless `name` already ends with it:

    .. code-block:: python

        >>> resolve('app.pages.Checkout', 'css')
        'app/pages/Checkout.css'
        >>> resolve('App::Pages::Checkout')
        'App/Pages/Checkout'
    """
    if not isinstance(name, str):
        raise InvalidIdentifier(f'Identifiers must be strings, got {name!r}')

    if _whitespace_regex.search(name):
        raise InvalidIdentifier(f'Identifier {name!r} contains whitespace')

    suffix = ''
    if extension:
        suffix = f'.{extension}'
        if name.endswith(suffix):
            name = name[: -len(suffix)]

    parts = _namespace_separator_regex.split(name)
    while parts and parts[0] == '':
        parts.pop(0)
    while parts and parts[-1] == '':
        parts.pop()

    if not parts:
        raise InvalidIdentifier(f'Identifier {name!r} is empty')

    if '' in parts:
        raise InvalidIdentifier(f'Identifier {name!r} has an empty namespace component')

    return '/'.join(parts) + suffix


def resolve_location(location, *, root, extension=None):
    if not location:
        raise InvalidIdentifier('Location can not be empty')

    if is_literal(location):
        return location

    path = resolve(location, extension)
    if not root:
        return path
    return f'{root.rstrip("/")}/{path}'
