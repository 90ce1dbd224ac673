from django.utils.html import format_html

from assetry.base import (
    get_title_separator,
    Registry,
)


class TitleStack(Registry):
    def __init__(self, *, mode=None, separator=None):
        super(TitleStack, self).__init__(mode=mode)
        self.separator = separator if separator is not None else get_title_separator()
        self.title = ''

    def set(self, title):
        if title is None:
            return
        self.assert_not_rendered()
        self.title = title

    def append(self, postfix):
        if postfix is None:
            return
        self.assert_not_rendered()
        self.title = f'{self.title}{self.separator}{postfix}' if self.title else postfix

    def push(self, prefix):
        if prefix is None:
            return
        self.assert_not_rendered()
        self.title = f'{prefix}{self.separator}{self.title}' if self.title else prefix

    def get(self):
        return self.title

    def render_development(self):
        return format_html('<title>{}</title>', self.title)

    render_optimized = render_development
