import re

from django.test import RequestFactory


def reindent(s, before=" ", after="    "):
    def reindent_line(line):
        m = re.match(r'^((' + re.escape(before) + r')*)(.*)', line)
        return after * (len(m.group(1)) // len(before)) + m.group(3)

    return "\n".join(reindent_line(line) for line in s.splitlines())


def verify_html(*, actual_html: str, find=None, expected_html: str = None):
    from bs4 import BeautifulSoup

    if expected_html is None:
        expected_html = '<html/>'

    expected_soup = BeautifulSoup(expected_html, 'html.parser')
    actual_soup = BeautifulSoup(actual_html, 'html.parser')

    if find is not None:
        actual_soup_orig = actual_soup
        actual_soup = actual_soup.find(find)

        if not actual_soup:  # pragma: no cover
            prettied_actual = reindent(actual_soup_orig.prettify()).strip()
            print(prettied_actual)
            assert False, f"Couldn't find selector {find} in actual output"

        expected_soup = expected_soup.find(find)

    prettified_actual = reindent(actual_soup.prettify()).strip()
    prettified_expected = reindent(expected_soup.prettify()).strip()
    if prettified_actual != prettified_expected:  # pragma: no cover
        print("Expected")
        print(prettified_expected)
        print("Actual")
        print(prettified_actual)

    assert prettified_actual == prettified_expected


def req(method, url='/', **data):
    return getattr(RequestFactory(HTTP_REFERER='/'), method.lower())(url, data=data)


def prettify(content):
    from bs4 import BeautifulSoup

    return reindent(BeautifulSoup(content, 'html.parser').prettify().strip())


class ListManifestReader:
    """
    Manifest reader serving manifests from a dict, for tests that don't care about the file system.
    """

    def __init__(self, manifests):
        self.manifests = manifests
        self.read_locations = []

    def read(self, location):
        from assetry.errors import ManifestReadError

        self.read_locations.append(location)
        try:
            return list(self.manifests[location])
        except KeyError:
            raise ManifestReadError(location, 'no such manifest') from None
