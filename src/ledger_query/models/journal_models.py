"""
Journal record types matched by queries: postings and transactions.

These are plain mutable dataclasses rather than pydantic models because a
posting keeps a back-reference to its parent transaction.
"""

import datetime
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class PostingType(str, Enum):
    """Kinds of posting, by how they take part in balancing."""

    REGULAR = "regular"
    VIRTUAL = "virtual"  # (account), not balanced
    BALANCED_VIRTUAL = "balanced_virtual"  # [account], balanced separately


@dataclass
class Posting:
    """One line of a transaction, moving an amount to or from an account."""

    account: str
    status: bool = False
    posting_type: PostingType = PostingType.REGULAR
    effective_date: Optional[datetime.date] = None
    # Set by Transaction; not part of the posting's identity
    transaction: Optional["Transaction"] = field(
        default=None, repr=False, compare=False
    )

    @property
    def is_real(self) -> bool:
        return self.posting_type == PostingType.REGULAR

    @property
    def is_cleared(self) -> bool:
        """Cleared if the posting or its transaction is marked cleared."""
        if self.status:
            return True
        return self.transaction is not None and self.transaction.status

    @property
    def effective_date_or_default(self) -> Optional[datetime.date]:
        """The posting's own effective date, else its transaction's, if any."""
        if self.effective_date is not None:
            return self.effective_date
        if self.transaction is None:
            return None
        return self.transaction.effective_date_or_default


@dataclass
class Transaction:
    """A dated, described set of postings."""

    date: datetime.date
    description: str = ""
    effective_date: Optional[datetime.date] = None
    status: bool = False
    postings: List[Posting] = field(default_factory=list)

    def __post_init__(self):
        for posting in self.postings:
            posting.transaction = self

    def add_posting(self, posting: Posting) -> None:
        """Append a posting, linking it back to this transaction."""
        posting.transaction = self
        self.postings.append(posting)

    @property
    def effective_date_or_default(self) -> datetime.date:
        return self.effective_date or self.date

    @property
    def has_real_postings(self) -> bool:
        return any(posting.is_real for posting in self.postings)


__all__ = ["PostingType", "Posting", "Transaction"]
