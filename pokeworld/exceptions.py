from pokeworld.models.models import ItemKind


class PokeWorldError(Exception):
    """Base class for recoverable game-state errors."""


class InsufficientFundsError(PokeWorldError):
    def __init__(self, cost: int, balance: int) -> None:
        super().__init__(f"Cannot afford {cost} with a balance of {balance}")
        self.cost = cost
        self.balance = balance


class OutOfStockError(PokeWorldError):
    def __init__(self, item_kind: ItemKind) -> None:
        super().__init__(f"No {item_kind.value} items left")
        self.item_kind = item_kind


class NoActiveCaptureError(PokeWorldError):
    pass


class NoActiveBattleError(PokeWorldError):
    pass


class CatalogLookupError(PokeWorldError):
    def __init__(self, catalog_id: int, reason: str) -> None:
        super().__init__(f"Catalog lookup failed for id {catalog_id}: {reason}")
        self.catalog_id = catalog_id


class LocationUnavailableError(PokeWorldError):
    pass
