from __future__ import annotations

from selenium import webdriver
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.chrome.service import Service
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import Select, WebDriverWait
from webdriver_manager.chrome import ChromeDriverManager

BASE_URL = "https://bmvs.onlineappointmentscheduling.net.au"

# Every wait on the site uses the same timeout.
WAIT_SECONDS = 10

INDIVIDUAL_BUTTON = (By.ID, "ContentPlaceHolder1_btnInd")
SUBURB_INPUT = (By.ID, "ContentPlaceHolder1_SelectLocation1_txtSuburb")
STATE_SELECT = (By.ID, "ContentPlaceHolder1_SelectLocation1_ddlState")
LOCATION_TABLE = (By.CSS_SELECTOR, ".tbl-location")


def start_driver(*, headless: bool) -> webdriver.Chrome:
    options = Options()
    if headless:
        options.add_argument("--headless=new")
    options.add_argument("--disable-gpu")
    options.add_argument("--no-sandbox")
    options.add_argument("--window-size=1200,900")
    options.add_argument("--disable-dev-shm-usage")

    service = Service(ChromeDriverManager().install())
    return webdriver.Chrome(service=service, options=options)


def wait_for_element(driver: webdriver.Chrome, locator: tuple[str, str]) -> WebElement:
    # TimeoutException propagates: nothing on this site is retried.
    return WebDriverWait(driver, WAIT_SECONDS).until(EC.presence_of_element_located(locator))


def set_field_value(element: WebElement, text: str) -> None:
    element.clear()
    element.send_keys(text)


def select_dropdown_option(driver: webdriver.Chrome, element: WebElement, value: str) -> None:
    """Select an option by value and let the page's onchange handler run.

    The state dropdown drives an ASP.NET postback script, so the change event
    has to be dispatched explicitly.
    """
    Select(element).select_by_value(value)
    driver.execute_script(
        "arguments[0].dispatchEvent(new Event('change', {bubbles: true}));",
        element,
    )


def run_postcode_search(driver: webdriver.Chrome) -> None:
    driver.execute_script("SearchPostCode();")


def read_table_rows(table: WebElement) -> list[list[str]]:
    """Texts of the td cells of every row, header row included."""
    rows: list[list[str]] = []
    for row in table.find_elements(By.CSS_SELECTOR, "tr"):
        cells = row.find_elements(By.CSS_SELECTOR, "td")
        rows.append([cell.text for cell in cells])
    return rows


def search_locations(driver: webdriver.Chrome, *, suburb: str, state: str) -> list[list[str]]:
    driver.get(BASE_URL)

    wait_for_element(driver, INDIVIDUAL_BUTTON).click()
    set_field_value(wait_for_element(driver, SUBURB_INPUT), suburb)
    select_dropdown_option(driver, wait_for_element(driver, STATE_SELECT), state)
    run_postcode_search(driver)

    table = wait_for_element(driver, LOCATION_TABLE)
    return read_table_rows(table)
