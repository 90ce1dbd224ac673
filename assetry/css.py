import re
from typing import (
    NamedTuple,
    Optional,
)

from django.utils.html import format_html_join
from django.utils.safestring import mark_safe

from assetry.attrs import render_tag
from assetry.base import (
    get_css_root,
    log,
    Registry,
)
from assetry.errors import (
    InvalidIdentifier,
    ManifestReadError,
)
from assetry.manifest import ManifestReader
from assetry.ordered import OrderedAssetList
from assetry.path import resolve_location

_style_end_regex = re.compile(r'</(style)', re.IGNORECASE)


class CssSource(NamedTuple):
    url: str
    # None means all devices, which is not the same as 'all'
    media: Optional[str] = None


def render_css_sources(sources):
    return format_html_join(
        '\n',
        '{}',
        (
            (render_tag('link', dict(href=source.url, media=source.media, rel='stylesheet', type='text/css')),)
            for source in sources
        ),
    )


def render_css_lines(lines):
    if not lines:
        return ''
    # CSS must not be html escaped, but it can't be allowed to close the style element
    css = '\n'.join(_style_end_regex.sub(r'<\\/\1', line) for line in lines)
    return render_tag('style', dict(type='text/css'), mark_safe(f'\n{css}\n'))


class CssRegistry(Registry):
    # language=rst
    """
    External style sheets and internal CSS for the head of a page.

    Locations are either literal URLs (`/css/site.css`, `https://cdn.example.com/x.css`) or symbolic
    identifiers (`app.pages.Checkout`) that resolve to a path below the CSS root:

    .. code-block:: python

        css.append_source('app.pages.Checkout')          # /css/app/pages/Checkout.css
        css.push_source('/css/reset.css', media='screen')
        css.append_line('body { margin: 0; }')

    Adding a source that is already present (same URL *and* media) moves it instead of duplicating it.
    """

    def __init__(self, *, mode=None, root=None, manifest_reader=None):
        super(CssRegistry, self).__init__(mode=mode)
        self.root = root if root is not None else get_css_root()
        self.manifest_reader = manifest_reader if manifest_reader is not None else ManifestReader()
        self.sources = OrderedAssetList()
        self.lines = OrderedAssetList()
        self.optimized_sources = OrderedAssetList()

    def resolve(self, location, media=None):
        return CssSource(resolve_location(location, root=self.root, extension='css'), media)

    def append_source(self, location, media=None):
        self.assert_not_rendered()
        self.note_mode_mismatch(location, optimized=False)
        self.sources.append_back(self.resolve(location, media))

    def push_source(self, location, media=None):
        self.assert_not_rendered()
        self.note_mode_mismatch(location, optimized=False)
        self.sources.push_front(self.resolve(location, media))

    def read_sources_list(self, location, media=None):
        manifest = resolve_location(location, root='', extension='txt')
        sources = []
        for identifier in self.manifest_reader.read(manifest):
            try:
                sources.append(self.resolve(identifier, media))
            except InvalidIdentifier as e:
                raise ManifestReadError(manifest, str(e)) from e
        log.debug('Importing %s CSS sources from %s', len(sources), manifest)
        return sources

    def append_sources_list(self, location, media=None):
        self.assert_not_rendered()
        self.note_mode_mismatch(location, optimized=False)
        self.sources.import_list(self.read_sources_list(location, media), at_front=False)

    def push_sources_list(self, location, media=None):
        self.assert_not_rendered()
        self.note_mode_mismatch(location, optimized=False)
        self.sources.import_list(self.read_sources_list(location, media), at_front=True)

    def append_line(self, line):
        if line is None:
            return
        self.assert_not_rendered()
        self.lines.append_back(line)

    def push_line(self, line):
        if line is None:
            return
        self.assert_not_rendered()
        self.lines.push_front(line)

    def optimized_append_source(self, url, media=None):
        self.assert_not_rendered()
        self.note_mode_mismatch(url, optimized=True)
        self.optimized_sources.append_back(CssSource(url, media))

    def optimized_push_source(self, url, media=None):
        self.assert_not_rendered()
        self.note_mode_mismatch(url, optimized=True)
        self.optimized_sources.push_front(CssSource(url, media))

    def render_development(self):
        parts = [render_css_sources(self.sources), render_css_lines(self.lines.to_sequence())]
        return mark_safe('\n'.join(x for x in parts if x))

    def render_optimized(self):
        return render_css_sources(self.optimized_sources)
