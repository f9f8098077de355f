"""
Fetch the class offering page: open a browser, let the user log in and run
the course search, then read the result page and return its HTML for parsing.
"""
from __future__ import annotations

import logging

from selenium import webdriver
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.chrome.service import Service
from selenium.webdriver.common.by import By
from webdriver_manager.chrome import ChromeDriverManager

from .offering_html import OFFERING_TABLE_SELECTOR

logger = logging.getLogger(__name__)


def fetch_offering_html(url: str) -> str:
    """
    Open Chrome at ``url``. The user searches for a course in the browser and
    presses Enter in the terminal; the page source is then returned.
    """
    options = Options()
    options.add_argument("--no-sandbox")
    options.add_argument("--disable-dev-shm-usage")
    try:
        service = Service(ChromeDriverManager().install())
        driver = webdriver.Chrome(service=service, options=options)
    except Exception as e:
        raise RuntimeError(
            f"Could not start Chrome for the class offering page. Install Chrome and run again. Error: {e}"
        ) from e

    try:
        driver.get(url)
        driver.implicitly_wait(5)

        print()
        print("In the browser:")
        print("  1. Log in if asked")
        print("  2. Search for the course")
        print("  3. Wait for the class offering table to load")
        print("  4. Come back to this terminal and press Enter")
        print()
        input("Press Enter when the table is shown -> ")

        if not driver.find_elements(By.CSS_SELECTOR, OFFERING_TABLE_SELECTOR):
            # saved layouts differ; offering_html falls back to a header match
            logger.warning("Offering table not at its usual place on %s", driver.current_url)
        return driver.page_source
    finally:
        driver.quit()
