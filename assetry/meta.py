from django.utils.safestring import mark_safe

from assetry.attrs import render_tag
from assetry.base import Registry
from assetry.ordered import OrderedAssetList


def attributes_identity(attributes):
    return tuple(sorted(attributes.items()))


class MetaRegistry(Registry):
    """
    Meta elements and the keywords of a page. Meta elements are the same regardless of render mode.
    """

    def __init__(self, *, mode=None):
        super(MetaRegistry, self).__init__(mode=mode)
        self.elements = {}
        self.keywords = OrderedAssetList()
        self._key_by_content = {}

    def add_element(self, attributes, key=None):
        self.assert_not_rendered()
        # None means "no attribute", like everywhere else in render_attrs
        attributes = {str(k): v for k, v in dict(attributes).items() if v is not None}
        content = attributes_identity(attributes)
        existing_key = self._key_by_content.get(content)
        if key is None:
            if existing_key is not None:
                return
            key = content
        elif existing_key is not None and existing_key != key:
            # the same element can only be rendered once, the latest key takes it over
            del self.elements[existing_key]

        previous = self.elements.get(key)
        if previous is not None:
            del self._key_by_content[attributes_identity(previous)]
        # last write wins, but the element keeps the position of the first write
        self.elements[key] = attributes
        self._key_by_content[content] = key

    def add_keyword(self, keyword):
        self.assert_not_rendered()
        if keyword not in self.keywords:
            self.keywords.append_back(keyword)

    def add_keywords(self, keywords):
        if isinstance(keywords, str):
            keywords = [keywords]
        for keyword in keywords:
            self.add_keyword(keyword)

    def render_development(self):
        elements = [render_tag('meta', attributes) for attributes in self.elements.values()]
        if self.keywords:
            elements.append(render_tag('meta', dict(name='keywords', content=','.join(self.keywords))))
        return mark_safe('\n'.join(elements))

    render_optimized = render_development
