"""Extension point for deciding whether an author indexable gets built."""

from typing import Callable

from seodex.domain.shared.error import NotEligibleError

# Receives the computed verdict (None means "build it") and the user id, returns
# the verdict to act on. Return a NotEligibleError to veto, None to allow.
EligibilityFilter = Callable[[NotEligibleError | None, int], NotEligibleError | None]


def keep_verdict(verdict: NotEligibleError | None, user_id: int) -> NotEligibleError | None:
    return verdict


def always_build(verdict: NotEligibleError | None, user_id: int) -> NotEligibleError | None:
    return None
