import logging
from enum import Enum
from os.path import join

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from assetry.errors import FrozenStateError

log = logging.getLogger('assetry')

FROZEN_MESSAGE = (
    '{name} has already been rendered for this request. All assets must be added before the first call to render().'
)


class RenderMode(Enum):
    development = 'development'
    optimized = 'optimized'

    def __str__(self):
        return self.value


def get_render_mode(mode=None):
    if mode is None:
        mode = getattr(settings, 'ASSETRY_RENDER_MODE', RenderMode.development)
    if isinstance(mode, RenderMode):
        return mode
    try:
        return RenderMode(mode)
    except ValueError:
        available = ', '.join(x.value for x in RenderMode)
        raise ImproperlyConfigured(f'Unknown render mode {mode!r}. Available modes: {available}') from None


def get_resource_root():
    root = getattr(settings, 'ASSETRY_RESOURCE_ROOT', None)
    if root is not None:
        return str(root)
    base_dir = getattr(settings, 'BASE_DIR', None)
    if base_dir is None:
        return 'www'
    return join(str(base_dir), 'www')


def get_css_root():
    return getattr(settings, 'ASSETRY_CSS_ROOT', '/css')


def get_js_root():
    return getattr(settings, 'ASSETRY_JS_ROOT', '/js')


def get_requirejs_url():
    return getattr(settings, 'ASSETRY_REQUIREJS_URL', '/js/require.js')


def get_optimized_bootstrap_url():
    return getattr(settings, 'ASSETRY_OPTIMIZED_BOOTSTRAP_URL', None) or get_requirejs_url()


def get_title_separator():
    return getattr(settings, 'ASSETRY_TITLE_SEPARATOR', ' - ')


class Registry:
    """
    Base class for the per request asset registries.

    A registry collects entries until it is rendered the first time. After that the
    content is frozen: rendering again gives the same output, mutating raises `FrozenStateError`.
    """

    _is_rendered = False

    def __init__(self, *, mode=None):
        self.mode = get_render_mode(mode)
        self._rendered = None

    def __repr__(self):
        r = ' (rendered)' if self._is_rendered else ''
        return f'<{type(self).__name__} {self.mode}{r}>'

    @property
    def is_optimized(self):
        return self.mode is RenderMode.optimized

    def assert_not_rendered(self):
        if self._is_rendered:
            raise FrozenStateError(FROZEN_MESSAGE.format(name=type(self).__name__))

    def note_mode_mismatch(self, what, optimized):
        if optimized != self.is_optimized:
            log.debug('%s: %s registered in %s mode will not be rendered', type(self).__name__, what, self.mode)

    def render(self):
        if not self._is_rendered:
            self._rendered = self.render_optimized() if self.is_optimized else self.render_development()
            self._is_rendered = True
        return self._rendered

    def render_development(self):
        raise NotImplementedError()  # pragma: no cover

    def render_optimized(self):
        raise NotImplementedError()  # pragma: no cover

    def __html__(self):
        return self.render()

    def __str__(self):
        return self.__html__()
