from selenium.webdriver.common.by import By

from . import locators
from .errors import ElementTimeoutError, NotFoundError
from .logger import get_logger
from .waits import clear_field, navigate, wait_for_element, wait_until

log = get_logger("stock")


def clear_previous_search(driver):
    """Reopen the search panel left by an earlier query and empty its field."""
    panels = driver.find_elements(By.CSS_SELECTOR, locators.PREVIOUS_SEARCH_PANEL)
    if not panels:
        return False
    log.info("Clearing previous search")
    panels[0].click()
    fields = driver.find_elements(By.CSS_SELECTOR, locators.STOCK_SEARCH_INPUT)
    if fields:
        clear_field(driver, fields[0])
    return True


def result_text(driver):
    for heading in driver.find_elements(By.CSS_SELECTOR, locators.STOCK_RESULT_HEADING):
        text = heading.text.strip()
        if text:
            return text
    return False


def get_stock(driver, settings, sku):
    poll = settings.poll_interval
    log.info(f"Looking up stock for SKU: {sku}")

    # 1️⃣ Stock report
    navigate(driver, settings.page_url(locators.STOCK_ROUTE), settings.nav_timeout, "stock report", poll)

    # 2️⃣ Previous search
    clear_previous_search(driver)

    # 3️⃣ Search field
    search = wait_for_element(
        driver, locators.STOCK_SEARCH_INPUT, settings.step_timeout, "stock search field", poll=poll
    )
    search.send_keys(sku)

    # 4️⃣ Suggestion
    log.info("Waiting for suggestion...")
    suggestion = wait_for_element(
        driver, locators.SUGGESTION, settings.step_timeout, "article suggestion", clickable=True, poll=poll
    )
    suggestion.click()

    # 5️⃣ Query
    wait_for_element(
        driver, locators.STOCK_QUERY_BUTTON, settings.short_timeout, "query button", clickable=True, poll=poll
    ).click()

    # 6️⃣ Result heading
    wait_for_element(
        driver, locators.STOCK_RESULT_HEADING, settings.step_timeout, "stock result", poll=poll
    )
    try:
        stock = wait_until(driver, result_text, settings.step_timeout, "stock result text", poll)
    except ElementTimeoutError:
        raise NotFoundError(f"Stock no encontrado para SKU {sku}.") from None

    log.info(f"Current stock for {sku}: {stock}")
    return {"sku": sku, "stock": stock}
