# core/references.py
import random
from dataclasses import dataclass
from typing import Final, Protocol
from util.constants import ExternalURIs

TX_HASH_PREFIX: Final[str] = "0x"
TX_HASH_BITS: Final[int] = 256


@dataclass(frozen=True)
class LedgerReference:
    tx_hash: str
    explorer_url: str


class ReferenceGenerator(Protocol):
    def generate(self) -> LedgerReference: ...


class MockReferenceGenerator:
    """
    Fabricates a transaction reference. Nothing is submitted anywhere; the
    hash is random and the explorer link points at it only for display.
    """

    def __init__(
        self,
        explorer_tx_url: str = ExternalURIs.SEPOLIA_TX,
        rng: random.Random | None = None,
    ) -> None:
        self._explorer_tx_url = explorer_tx_url
        self._rng = rng or random.Random()

    def tx_hash(self) -> str:
        return f"{TX_HASH_PREFIX}{self._rng.getrandbits(TX_HASH_BITS):064x}"

    def explorer_url(self, tx_hash: str) -> str:
        return f"{self._explorer_tx_url}{tx_hash}"

    def generate(self) -> LedgerReference:
        tx = self.tx_hash()
        return LedgerReference(tx_hash=tx, explorer_url=self.explorer_url(tx))
