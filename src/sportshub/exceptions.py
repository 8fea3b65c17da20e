"""Exception types raised by SportsHub value objects and subscriptions."""


class SportsHubError(Exception):
    """Base class for SportsHub errors."""


class UnknownSportError(SportsHubError, ValueError):
    def __init__(self, value: object) -> None:
        super().__init__(f"unknown sport: {value!r}")
        self.value = value


class InvalidMatchError(SportsHubError, ValueError):
    """A match result that cannot exist, e.g. a player beating themselves."""


class InvalidCommitmentRecordError(SportsHubError, ValueError):
    """Strike count and last-strike timestamp disagree, or the count is negative."""


class SubscriptionClosedError(SportsHubError):
    def __init__(self, subscription_id: object) -> None:
        super().__init__(f"subscription {subscription_id} is closed")
        self.subscription_id = subscription_id
