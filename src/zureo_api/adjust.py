from enum import Enum

from selenium.webdriver.common.by import By

from . import locators
from .logger import get_logger
from .quantity import parse_quantity, same_quantity
from .waits import (
    clear_field,
    find_modal,
    js_click,
    navigate,
    set_value,
    wait_for_element,
    wait_until,
)

log = get_logger("adjust")


class AdjustmentPhase(Enum):
    IDLE = "idle"
    NAVIGATED = "navigated"
    ARTICLE_SELECTED = "article_selected"
    QUANTITY_ENTERED = "quantity_entered"
    MOVEMENT_ADDED = "movement_added"
    SAVED = "saved"
    CONFIRMED = "confirmed"
    FAILED = "failed"


class Adjustment:
    """Progress of one stock adjustment through the Zureo form."""

    def __init__(self, sku, cantidad):
        self.sku = sku
        self.cantidad = cantidad
        self.target = parse_quantity(cantidad)
        self.phase = AdjustmentPhase.IDLE
        self.failed_at = None

    def advance(self, phase):
        log.info(f"[{self.sku}] {self.phase.value} -> {phase.value}")
        self.phase = phase

    def fail(self):
        self.failed_at = self.phase
        self.phase = AdjustmentPhase.FAILED

    @property
    def message(self):
        return f"Stock ajustado a {self.cantidad} para SKU {self.sku}"


def matching_suggestion(driver, sku):
    wanted = sku.lower()
    for suggestion in driver.find_elements(By.CSS_SELECTOR, locators.SUGGESTION):
        if wanted in suggestion.text.lower():
            return suggestion
    return False


def confirm_button(driver):
    modal = find_modal(driver, locators.CONFIRM_ADJUSTMENT_TEXT)
    if modal is None:
        return False
    buttons = modal.find_elements(By.CSS_SELECTOR, locators.MODAL_PRIMARY)
    return buttons[0] if buttons else False


def _steps(driver, settings, adjustment):
    poll = settings.poll_interval
    step = settings.step_timeout
    sku, cantidad = adjustment.sku, adjustment.cantidad

    # 1️⃣ Adjustment view
    navigate(driver, settings.page_url(locators.ADJUST_ROUTE), settings.nav_timeout, "adjustment view", poll)
    adjustment.advance(AdjustmentPhase.NAVIGATED)

    # 2️⃣ Adjustment type
    log.info("Selecting adjustment type...")
    kind = wait_for_element(driver, locators.ADJUSTMENT_TYPE, step, "adjustment type", poll=poll)
    set_value(driver, kind, locators.ADJUSTMENT_TYPE_VALUE)

    # 3️⃣ Article
    log.info(f"Entering SKU: {sku}")
    article = wait_for_element(driver, locators.ARTICLE_INPUT, step, "article field", poll=poll)
    clear_field(driver, article)
    article.send_keys(sku)
    suggestion = wait_until(driver, lambda d: matching_suggestion(d, sku), step, "article suggestion", poll)
    js_click(driver, suggestion)

    # 4️⃣ Current stock loaded
    wait_for_element(driver, locators.CURRENT_STOCK_INPUT, step, "current stock", poll=poll)
    adjustment.advance(AdjustmentPhase.ARTICLE_SELECTED)

    # 5️⃣ Target quantity
    log.info(f"Entering quantity: {cantidad}")
    target = wait_for_element(driver, locators.TARGET_QUANTITY_INPUT, step, "target quantity field", poll=poll)
    set_value(driver, target, cantidad)
    wait_until(
        driver,
        lambda d: same_quantity(target.get_attribute("value"), cantidad),
        settings.quantity_check_timeout,
        "quantity check",
        poll,
    )
    adjustment.advance(AdjustmentPhase.QUANTITY_ENTERED)

    # 6️⃣ Add movement
    wait_for_element(driver, locators.ADD_MOVEMENT_BUTTON, step, "add movement", clickable=True, poll=poll).click()
    adjustment.advance(AdjustmentPhase.MOVEMENT_ADDED)

    # 7️⃣ Save
    wait_for_element(driver, locators.SAVE_BUTTON, step, "save adjustment", clickable=True, poll=poll).click()
    adjustment.advance(AdjustmentPhase.SAVED)

    # 8️⃣ Confirmation modal
    log.info("Waiting for confirmation modal...")
    button = wait_until(driver, confirm_button, step, "confirmation modal", poll)
    js_click(driver, button)
    adjustment.advance(AdjustmentPhase.CONFIRMED)


def run_adjustment(driver, settings, adjustment):
    log.info(f"Starting stock adjustment for SKU: {adjustment.sku} => {adjustment.cantidad}")
    try:
        _steps(driver, settings, adjustment)
    except Exception:
        adjustment.fail()
        log.error(f"Adjustment for {adjustment.sku} aborted after phase '{adjustment.failed_at.value}'")
        raise
    log.info(f"Adjustment finished for {adjustment.sku}")
    return adjustment


def adjust_stock(driver, settings, sku, cantidad):
    adjustment = run_adjustment(driver, settings, Adjustment(sku, cantidad))
    return {"success": True, "message": adjustment.message}
