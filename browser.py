"""
Selenium access to the Google Maps interface.

MapsPage is the only place that knows about CSS selectors of the live UI;
the collector, enricher and gallery modules talk to it through plain
methods so they can run against a fake page in tests.
"""

import time
from selenium import webdriver
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.common.by import By
from selenium.webdriver.common.keys import Keys
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait
from selenium.common.exceptions import WebDriverException

import config
from models import Author
from parsing import clean_background_image_url

SEARCH_BOX_SELECTOR = "#searchboxinput"
GALLERY_ITEM_SELECTOR = 'div:last-child>div:first-child div>div>a[href="#"]'
VIDEO_MARKER_SELECTOR = 'div[role="img"]>div.fontLabelMedium'
IMAGE_LOADED_SELECTOR = 'div[role="img"]>div.loaded'
AUTHOR_AVATAR_SELECTOR = "a:first-child>div"
AUTHOR_LINK_SELECTOR = "a:first-child"
AUTHOR_NAME_SELECTOR = "a:last-child>span"


class SearchUnavailable(RuntimeError):
    """The Maps search box could not be reached; nothing else can run."""


def css_string(value):
    """Escape a value for use inside a double-quoted CSS attribute selector."""
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\a ")
        .replace("\r", "\\d ")
    )


def create_driver(headless=config.HEADLESS):
    chrome_opts = Options()
    if headless:
        chrome_opts.add_argument("--headless=new")
    chrome_opts.add_argument(f"--window-size={config.WINDOW_WIDTH},{config.WINDOW_HEIGHT}")
    chrome_opts.add_argument("--lang=id")

    driver = webdriver.Chrome(options=chrome_opts)
    driver.set_window_size(config.WINDOW_WIDTH, config.WINDOW_HEIGHT)
    return driver


class MapsPage:
    def __init__(self, driver):
        self.driver = driver

    def find(self, selector, timeout, visible=False, root=None):
        """Wait up to `timeout` seconds for `selector`; None when it never shows up or the lookup fails."""
        condition = EC.visibility_of_element_located if visible else EC.presence_of_element_located
        try:
            return WebDriverWait(root or self.driver, timeout).until(
                condition((By.CSS_SELECTOR, selector))
            )
        except WebDriverException:
            return None

    # --- search results -------------------------------------------------

    def search(self, query, timeout=config.RESULTS_TIMEOUT):
        """Run a search and return the results container, or None."""
        try:
            self.driver.get(config.MAPS_URL)
        except WebDriverException as e:
            raise SearchUnavailable(f"Could not open {config.MAPS_URL}: {e}") from e

        search_box = self.find(SEARCH_BOX_SELECTOR, config.SEARCHBOX_TIMEOUT)
        if search_box is None:
            raise SearchUnavailable(f"Search box not found on {config.MAPS_URL}")

        search_box.clear()
        search_box.send_keys(query)
        search_box.send_keys(Keys.ENTER)

        label = config.RESULTS_LABEL_TEMPLATE.format(query=query)
        return self.find(f'div[aria-label="{css_string(label)}"]', timeout)

    def scroll_results(self, box):
        """Scroll the results container to its bottom and return its height."""
        return self.driver.execute_script(
            "arguments[0].scrollBy(0, arguments[0].scrollHeight);"
            "return arguments[0].scrollHeight;",
            box,
        )

    def results_html(self, box):
        return box.get_attribute("outerHTML") or ""

    # --- detail view ----------------------------------------------------

    def open_place(self, link, title, timeout=config.NAV_TIMEOUT):
        """Load a place page. Returns False when navigation fails or times out."""
        self.driver.set_page_load_timeout(timeout)
        try:
            self.driver.get(link)
        except WebDriverException as e:
            print(f"  Navigation failed for {title}: {e.__class__.__name__}")
            return False

        # Panels render after the load event; missing panels surface later as empty fields
        self.find(f'div[aria-label="{css_string(title)}"][role="main"]', config.GALLERY_TIMEOUT)
        return True

    def read_text(self, selector, timeout=config.FIELD_TIMEOUT):
        element = self.find(selector, timeout, visible=True)
        if element is None:
            return ""
        try:
            return element.text.strip()
        except WebDriverException:
            return ""

    def about_text(self, title, timeout=config.FIELD_TIMEOUT):
        label = config.ABOUT_LABEL_TEMPLATE.format(title=title)
        return self.read_text(
            f'div[role="region"][aria-label="{css_string(label)}"] div.fontBodyMedium div>div:first-child',
            timeout,
        )

    def address_text(self, title, timeout=config.FIELD_TIMEOUT):
        return self.read_text(
            f'div[role="region"] button[data-tooltip="{css_string(config.ADDRESS_TOOLTIP)}"] div.fontBodyMedium',
            timeout,
        )

    # --- gallery --------------------------------------------------------

    def gallery_entry(self, title, timeout=config.GALLERY_TIMEOUT):
        label = config.PHOTOS_LABEL_TEMPLATE.format(title=title)
        return self.find(
            f'div[aria-label="{css_string(title)}"][role="main"] button[aria-label="{css_string(label)}"]',
            timeout,
        )

    def open_gallery(self, entry, title, timeout=config.GALLERY_TIMEOUT):
        """Open the photo panel; returns its items, or None if it never renders."""
        self.driver.execute_script("arguments[0].click();", entry)

        label = config.PHOTOS_LABEL_TEMPLATE.format(title=title)
        panel_selector = f'div[aria-label="{css_string(label)}"][role="main"]'
        panel = self.find(panel_selector, timeout)
        if panel is None:
            return None
        if self.find(f"{panel_selector} {GALLERY_ITEM_SELECTOR}", timeout) is None:
            return None

        return panel.find_elements(By.CSS_SELECTOR, GALLERY_ITEM_SELECTOR)

    def is_video(self, item):
        return bool(item.find_elements(By.CSS_SELECTOR, VIDEO_MARKER_SELECTOR))

    def select_item(self, item, settle=config.GALLERY_SETTLE):
        self.driver.execute_script("arguments[0].click();", item)
        item.click()
        time.sleep(settle)

    def loaded_image_url(self, item, timeout=config.IMAGE_LOADED_TIMEOUT):
        """Background image URL of the item once loaded, or None."""
        surface = self.find(IMAGE_LOADED_SELECTOR, timeout, root=item)
        if surface is None:
            return None
        return clean_background_image_url(surface.value_of_css_property("background-image"))

    def wait_for_first(self, selectors, timeout=config.ATTRIBUTION_TIMEOUT):
        """
        Poll all `selectors` together until one matches.

        Returns (index, element) for the first selector, in the given order,
        that matched on the winning poll, or None when none did in time.
        """
        def first_match(driver):
            for index, selector in enumerate(selectors):
                found = driver.find_elements(By.CSS_SELECTOR, selector)
                if found:
                    return index, found[0]
            return False

        try:
            return WebDriverWait(self.driver, timeout).until(first_match)
        except WebDriverException:
            return None

    def read_attribution(self, byline):
        avatar = self._first(byline, AUTHOR_AVATAR_SELECTOR)
        link = self._first(byline, AUTHOR_LINK_SELECTOR)
        name = self._first(byline, AUTHOR_NAME_SELECTOR)

        return Author(
            name=(name.get_attribute("textContent") or "").strip() if name else "",
            profile_link=(link.get_attribute("href") or "") if link else "",
            avatar_url=clean_background_image_url(avatar.value_of_css_property("background-image")) if avatar else "",
        )

    @staticmethod
    def _first(root, selector):
        found = root.find_elements(By.CSS_SELECTOR, selector)
        return found[0] if found else None
