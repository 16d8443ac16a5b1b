"""Payment recipient value object.

A recipient is identified in exactly one of four ways:

    SHOP          shop_id
    SHOP_ARTICLE  shop_id + shop_article_id
    PATTERN       pattern_id (showcase reference)
    ACCOUNT       account (wallet account, phone or email; P2P transfers)

Fields that do not belong to the chosen shape are None, never "".
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from payment_request.domain.exceptions import InvalidArgumentError
from payment_request.domain.validation import check_id, check_not_empty


class RecipientKind(Enum):
    """Identification shape of a recipient."""

    SHOP = "shop"
    SHOP_ARTICLE = "shop_article"
    PATTERN = "pattern"
    ACCOUNT = "account"


@dataclass(frozen=True, slots=True)
class Recipient:
    """Who receives the payment.

    Prefer the named factories; each populates the fields of exactly one
    shape. Direct construction goes through the same shape check.
    """

    shop_id: int | None = None
    shop_article_id: int | None = None
    pattern_id: str | None = None
    account: str | None = None

    def __post_init__(self) -> None:
        # Raises if no shape or more than one shape matches.
        self._resolve_kind()

    @classmethod
    def from_shop(cls, shop_id: int) -> Recipient:
        """Payment to a shop with a single article."""
        return cls(shop_id=check_id(shop_id, "shop_id"))

    @classmethod
    def from_shop_article(cls, shop_id: int, shop_article_id: int) -> Recipient:
        """Payment directly to a specific article of a shop."""
        return cls(
            shop_id=check_id(shop_id, "shop_id"),
            shop_article_id=check_id(shop_article_id, "shop_article_id"),
        )

    @classmethod
    def from_pattern_id(cls, pattern_id: str) -> Recipient:
        """Payment through a showcase; the server resolves the recipient.

        Raises:
            InvalidArgumentError: If pattern_id is None or empty.
        """
        return cls(pattern_id=check_not_empty(pattern_id, "pattern_id"))

    @classmethod
    def from_account(cls, account: str) -> Recipient:
        """P2P transfer to a wallet.

        Raises:
            InvalidArgumentError: If account is None or empty.
        """
        return cls(account=check_not_empty(account, "account"))

    @property
    def kind(self) -> RecipientKind:
        return self._resolve_kind()

    def _resolve_kind(self) -> RecipientKind:
        has_shop = self.shop_id is not None
        has_article = self.shop_article_id is not None
        has_pattern = self.pattern_id is not None
        has_account = self.account is not None

        if sum((has_shop, has_pattern, has_account)) != 1:
            raise InvalidArgumentError(
                "Recipient requires exactly one of shop_id, pattern_id or account"
            )

        if has_article and not has_shop:
            raise InvalidArgumentError("shop_article_id requires shop_id")

        if has_shop:
            check_id(self.shop_id, "shop_id")
            if has_article:
                check_id(self.shop_article_id, "shop_article_id")
                return RecipientKind.SHOP_ARTICLE
            return RecipientKind.SHOP

        if has_pattern:
            check_not_empty(self.pattern_id, "pattern_id")
            return RecipientKind.PATTERN

        check_not_empty(self.account, "account")
        return RecipientKind.ACCOUNT
