"""Per-record performance figures shown on record detail views."""

from decimal import Decimal

from household_finance.domain.models import (
    CreditProgress,
    CreditRecord,
    InvestmentPerformance,
    InvestmentRecord,
    StockPosition,
    StockRecord,
)

HUNDRED = Decimal("100")


def compute_credit_progress(credit: CreditRecord) -> CreditProgress:
    """Return how much of a credit has been repaid.

    Args:
        credit: Credit with its original and remaining amounts.

    Returns:
        CreditProgress: Paid amount and percentage of the original principal.
    """
    total = credit.total_amount or Decimal("0")
    paid = total - credit.remaining_amount
    if total == 0:
        return CreditProgress(paid_amount=paid, progress_percentage=Decimal("0"))
    return CreditProgress(
        paid_amount=paid,
        progress_percentage=(paid / total) * HUNDRED,
    )


def display_price(stock: StockRecord) -> Decimal | None:
    """Return the current price when known, else the purchase price."""
    return stock.current_price or stock.purchase_price or None


def compute_stock_position(stock: StockRecord) -> StockPosition:
    """Value a stock position in its own currency.

    Args:
        stock: Stock record.

    Returns:
        StockPosition: Value and dividend at the display price; gain/loss
        only when both purchase and current prices are known.
    """
    price = display_price(stock)
    total_value = stock.shares * price if price is not None else None
    annual_dividend = None
    if total_value is not None and stock.dividend_yield:
        annual_dividend = (total_value * stock.dividend_yield) / HUNDRED

    gain_loss = None
    gain_loss_percentage = None
    if stock.purchase_price and stock.current_price:
        gain_loss = (stock.current_price - stock.purchase_price) * stock.shares
        gain_loss_percentage = (
            (stock.current_price - stock.purchase_price)
            / stock.purchase_price
            * HUNDRED
        )
    return StockPosition(
        display_price=price,
        total_value=total_value,
        annual_dividend=annual_dividend,
        gain_loss=gain_loss,
        gain_loss_percentage=gain_loss_percentage,
    )


def investment_current_value(investment: InvestmentRecord) -> Decimal:
    """Return the latest valuation, falling back to the cost basis."""
    if investment.current_value:
        return investment.current_value
    return investment.amount


def compute_investment_performance(
    investment: InvestmentRecord,
) -> InvestmentPerformance:
    """Return the gain or loss of an investment against its cost basis.

    Args:
        investment: Investment record.

    Returns:
        InvestmentPerformance: Current value, absolute and relative gain.
    """
    current_value = investment_current_value(investment)
    gain_loss = current_value - investment.amount
    percentage = (
        gain_loss / investment.amount * HUNDRED
        if investment.amount > 0
        else Decimal("0")
    )
    return InvestmentPerformance(
        current_value=current_value,
        gain_loss=gain_loss,
        gain_loss_percentage=percentage,
    )


__all__ = [
    "compute_credit_progress",
    "compute_investment_performance",
    "compute_stock_position",
    "display_price",
    "investment_current_value",
]
