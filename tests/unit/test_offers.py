"""Unit tests for bank offer selection"""

from lumina_finance.domain.models import BankOffer
from lumina_finance.domain.amortization import compute_installment
from lumina_finance.domain.offers import (
    best_rate,
    derive_instalments,
    normalize_offer,
    pick_best,
    principal_debt_of,
)


def test_best_rate_uses_lowest_present_rate():
    assert best_rate(BankOffer("ABSA", interest_rate_linked=12.5, interest_rate_fixed=13.1)) == 12.5
    assert best_rate(BankOffer("WesBank", interest_rate_fixed=11.9)) == 11.9
    assert best_rate(BankOffer("Nedbank")) is None


def test_pick_best_lowest_rate_wins():
    offers = [
        BankOffer("ABSA", interest_rate_linked=13.0, interest_rate_fixed=13.75),
        BankOffer("WesBank", interest_rate_fixed=12.25),
        BankOffer("Standard Bank", interest_rate_linked=12.75),
    ]

    assert pick_best(offers).bank_name == "WesBank"


def test_pick_best_skips_offers_without_rate():
    offers = [
        BankOffer("Nedbank", balloon_amount=50_000),
        BankOffer("ABSA", interest_rate_linked=14.0),
    ]

    assert pick_best(offers).bank_name == "ABSA"


def test_pick_best_no_eligible_offer():
    assert pick_best([]) is None
    assert pick_best([BankOffer("Nedbank"), BankOffer("ABSA")]) is None


def test_pick_best_tie_keeps_first():
    offers = [
        BankOffer("ABSA", interest_rate_linked=12.0),
        BankOffer("WesBank", interest_rate_fixed=12.0),
    ]

    assert pick_best(offers).bank_name == "ABSA"


def test_normalize_offer_balloon_percent():
    offer = BankOffer("ABSA", interest_rate_linked=12.5, interest_rate_fixed=12.9, balloon_amount=105_000)

    terms = normalize_offer(offer, 300_000)

    assert terms.rate == 12.5
    assert terms.balloon_percent == 35


def test_normalize_offer_clamps_to_ceiling():
    offer = BankOffer("ABSA", interest_rate_linked=12.5, balloon_amount=150_000)

    assert normalize_offer(offer, 200_000).balloon_percent == 75
    assert normalize_offer(offer, 300_000, max_balloon_percent=30).balloon_percent == 30


def test_normalize_offer_without_balloon_or_price():
    offer = BankOffer("ABSA", interest_rate_fixed=13.0)

    assert normalize_offer(offer, 300_000).balloon_percent == 0
    assert normalize_offer(BankOffer("ABSA", balloon_amount=10_000), 0).balloon_percent == 0


def test_derive_instalments():
    offer = BankOffer(
        "ABSA",
        interest_rate_linked=12.5,
        balloon_amount=90_000,
        principal_debt=270_000,
    )

    derived = derive_instalments(offer, 72)

    assert derived.instalment_linked == compute_installment(270_000, 12.5, 72, 90_000)
    assert derived.instalment_fixed is None
    assert offer.instalment_linked is None  # input offer untouched


def test_principal_debt_from_cash_price_and_fees():
    offer = BankOffer(
        "FNB",
        interest_rate_linked=12.0,
        cash_price=250_000,
        license_fee=1_200,
        delivery_fee=2_500,
        admin_fee=1_000,
        initiation_fee=1_207,
    )

    assert principal_debt_of(offer) == 255_907
    assert principal_debt_of(BankOffer("FNB", cash_price=250_000, principal_debt=240_000)) == 240_000


def test_derive_instalments_without_stored_principal_debt():
    offer = BankOffer(
        "FNB",
        interest_rate_linked=12.0,
        cash_price=250_000,
        license_fee=1_200,
        delivery_fee=2_500,
        admin_fee=1_000,
        initiation_fee=1_207,
    )

    derived = derive_instalments(offer, 72)

    assert derived.principal_debt == 255_907
    assert derived.instalment_linked == compute_installment(255_907, 12.0, 72)
    assert derived.instalment_linked > 0
