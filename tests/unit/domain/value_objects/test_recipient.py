"""Tests for Recipient.

Each factory must populate the fields of exactly one identification shape
and leave every other field as None.
"""

import pytest

from payment_request.domain.exceptions import InvalidArgumentError
from payment_request.domain.value_objects import Recipient, RecipientKind

ALL_FIELDS = ("shop_id", "shop_article_id", "pattern_id", "account")


def populated_fields(recipient: Recipient) -> dict[str, object]:
    return {
        name: getattr(recipient, name)
        for name in ALL_FIELDS
        if getattr(recipient, name) is not None
    }


class TestRecipientShapes:
    def test_from_shop(self) -> None:
        recipient = Recipient.from_shop(12345)

        assert populated_fields(recipient) == {"shop_id": 12345}
        assert recipient.kind is RecipientKind.SHOP

    def test_from_shop_article(self) -> None:
        recipient = Recipient.from_shop_article(12345, 678)

        assert populated_fields(recipient) == {"shop_id": 12345, "shop_article_id": 678}
        assert recipient.kind is RecipientKind.SHOP_ARTICLE

    def test_from_pattern_id(self) -> None:
        recipient = Recipient.from_pattern_id("p2p")

        assert populated_fields(recipient) == {"pattern_id": "p2p"}
        assert recipient.kind is RecipientKind.PATTERN

    def test_from_account(self) -> None:
        recipient = Recipient.from_account("410011234567890")

        assert populated_fields(recipient) == {"account": "410011234567890"}
        assert recipient.kind is RecipientKind.ACCOUNT

    def test_zero_shop_id_is_populated(self) -> None:
        recipient = Recipient.from_shop(0)

        assert recipient.shop_id == 0
        assert recipient.kind is RecipientKind.SHOP


class TestRecipientValidation:
    @pytest.mark.parametrize("pattern_id", [None, ""])
    def test_from_pattern_id_raises_for_missing(self, pattern_id: str | None) -> None:
        with pytest.raises(InvalidArgumentError):
            Recipient.from_pattern_id(pattern_id)  # type: ignore[arg-type]

    @pytest.mark.parametrize("account", [None, ""])
    def test_from_account_raises_for_missing(self, account: str | None) -> None:
        with pytest.raises(InvalidArgumentError):
            Recipient.from_account(account)  # type: ignore[arg-type]

    def test_from_shop_raises_for_none(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Recipient.from_shop(None)  # type: ignore[arg-type]

    def test_from_shop_article_raises_for_missing_article(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Recipient.from_shop_article(12345, None)  # type: ignore[arg-type]

    def test_from_shop_raises_for_string_id(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Recipient.from_shop("12345")  # type: ignore[arg-type]


class TestRecipientExclusivity:
    def test_no_shape_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Recipient()

    def test_shop_and_pattern_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Recipient(shop_id=1, pattern_id="p2p")

    def test_pattern_and_account_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Recipient(pattern_id="p2p", account="410011234567890")

    def test_article_without_shop_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Recipient(shop_article_id=678)

    def test_article_with_account_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Recipient(shop_article_id=678, account="410011234567890")

    def test_empty_account_is_not_absent(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Recipient(account="")


class TestRecipientImmutability:
    def test_recipient_is_frozen(self) -> None:
        recipient = Recipient.from_shop(12345)

        with pytest.raises(AttributeError):
            recipient.pattern_id = "p2p"  # type: ignore[misc]

    def test_recipient_is_hashable(self) -> None:
        recipients = {Recipient.from_shop(1), Recipient.from_shop(1), Recipient.from_account("a")}

        assert len(recipients) == 2
