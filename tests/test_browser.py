"""
Tests for MapsPage against a stub WebDriver.

The stub answers CSS lookups from a fixed tree of elements, so the real
WebDriverWait polling and expected conditions run unchanged.
"""
from selenium.common.exceptions import InvalidSelectorException, NoSuchElementException

from browser import IMAGE_LOADED_SELECTOR, MapsPage, css_string
from gallery import ATTRIBUTION_BYLINES
from models import Author

OWNER_SELECTOR = ATTRIBUTION_BYLINES[0][1]
CONTRIBUTOR_SELECTOR = ATTRIBUTION_BYLINES[1][1]
SELECTORS = [OWNER_SELECTOR, CONTRIBUTOR_SELECTOR]

AVATAR = "https://lh3.googleusercontent.com/a/avatar=s40"
PHOTO = "https://lh5.googleusercontent.com/p/AF1Qip=w203-h152-k-no"


class StubElement:
    def __init__(self, text="", attributes=None, css=None, children=None):
        self._text = text
        self.attributes = attributes or {}
        self.css = css or {}
        # {css selector: [StubElement, ...]}
        self.children = children or {}

    @property
    def text(self):
        return self._text

    def find_elements(self, by, selector):
        return list(self.children.get(selector, []))

    def find_element(self, by, selector):
        found = self.find_elements(by, selector)
        if not found:
            raise NoSuchElementException(f"no element for {selector}")
        return found[0]

    def get_attribute(self, name):
        return self.attributes.get(name)

    def value_of_css_property(self, name):
        return self.css.get(name, "none")

    def is_displayed(self):
        return True


class StubDriver(StubElement):
    """
    `appear_on` delays a selector until its n-th lookup, counting from 1.
    Selectors holding a raw line break are rejected like Chrome does.
    """

    def __init__(self, children=None, appear_on=None, broken=False):
        super().__init__(children=children)
        self.appear_on = appear_on or {}
        self.broken = broken
        self.lookups = []

    def find_elements(self, by, selector):
        self.lookups.append(selector)
        if self.broken or "\n" in selector:
            raise InvalidSelectorException(f"invalid selector: {selector!r}")
        if self.lookups.count(selector) < self.appear_on.get(selector, 1):
            return []
        return super().find_elements(by, selector)


def background(url):
    return {"background-image": f'url("{url}")'}


class TestWaitForFirst:

    def test_owner_taken_when_both_present(self):
        owner, contributor = StubElement(text="owner"), StubElement(text="contributor")
        driver = StubDriver(children={OWNER_SELECTOR: [owner], CONTRIBUTOR_SELECTOR: [contributor]})

        assert MapsPage(driver).wait_for_first(SELECTORS, timeout=2) == (0, owner)

    def test_first_selector_to_appear_wins(self):
        owner, contributor = StubElement(text="owner"), StubElement(text="contributor")
        driver = StubDriver(
            children={OWNER_SELECTOR: [owner], CONTRIBUTOR_SELECTOR: [contributor]},
            appear_on={OWNER_SELECTOR: 3, CONTRIBUTOR_SELECTOR: 2},
        )

        assert MapsPage(driver).wait_for_first(SELECTORS, timeout=5) == (1, contributor)
        assert driver.lookups.count(OWNER_SELECTOR) == 2

    def test_nothing_appears(self):
        assert MapsPage(StubDriver()).wait_for_first(SELECTORS, timeout=0) is None

    def test_rejected_selector_counts_as_no_match(self):
        assert MapsPage(StubDriver(broken=True)).wait_for_first(SELECTORS, timeout=0) is None


class TestReadAttribution:

    def test_reads_name_profile_and_avatar(self):
        byline = StubElement(children={
            "a:first-child>div": [StubElement(css=background(AVATAR))],
            "a:first-child": [StubElement(attributes={"href": "https://www.google.com/maps/contrib/1234"})],
            "a:last-child>span": [StubElement(attributes={"textContent": "  Budi Santoso "})],
        })

        author = MapsPage(StubDriver()).read_attribution(byline)

        assert author == Author(
            name="Budi Santoso",
            profile_link="https://www.google.com/maps/contrib/1234",
            avatar_url=AVATAR,
        )

    def test_missing_parts_are_empty(self):
        assert MapsPage(StubDriver()).read_attribution(StubElement()) == Author()


class TestLoadedImageUrl:

    def test_unwraps_background_image(self):
        item = StubElement(children={IMAGE_LOADED_SELECTOR: [StubElement(css=background(PHOTO))]})

        assert MapsPage(StubDriver()).loaded_image_url(item, timeout=0) == PHOTO

    def test_unloaded_item(self):
        assert MapsPage(StubDriver()).loaded_image_url(StubElement(), timeout=0) is None


class TestDetailFields:

    def test_rejected_selector_reads_as_empty(self):
        page = MapsPage(StubDriver(broken=True))

        assert page.about_text("Curug Cigentis", timeout=0) == ""
        assert page.address_text("Curug Cigentis", timeout=0) == ""

    def test_line_break_in_title_is_escaped(self):
        driver = StubDriver()

        assert MapsPage(driver).about_text("Curug\nCigentis", timeout=0) == ""
        assert driver.lookups
        assert all("\n" not in selector for selector in driver.lookups)


def test_css_string_escapes():
    assert css_string('Taman "Bunga"') == 'Taman \\"Bunga\\"'
    assert css_string("a\\b") == "a\\\\b"
    assert css_string("Curug\nCigentis") == "Curug\\a Cigentis"
