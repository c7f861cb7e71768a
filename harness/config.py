"""Example configuration: the numeric knobs an example is run with."""

import json
from dataclasses import dataclass
from typing import Optional

from primitives.hashing import HashFunction
from protocol.options import ProofOptions


@dataclass
class ExampleOptions:
    """User-facing options, resolved into ProofOptions per example.

    num_queries and blowup_factor default per example when left unset.
    """
    hash_fn: str = "blake3_256"
    num_queries: Optional[int] = None
    blowup_factor: Optional[int] = None
    grinding_factor: int = 16
    folding_factor: int = 8
    remainder_max_degree: int = 31

    @classmethod
    def from_dict(cls, d: dict) -> "ExampleOptions":
        """Load options from a parsed JSON object with camelCase keys."""
        defaults = cls()
        return cls(
            hash_fn=d.get("hashFn", defaults.hash_fn),
            num_queries=d.get("numQueries", defaults.num_queries),
            blowup_factor=d.get("blowupFactor", defaults.blowup_factor),
            grinding_factor=d.get("grindingFactor", defaults.grinding_factor),
            folding_factor=d.get("foldingFactor", defaults.folding_factor),
            remainder_max_degree=d.get("remainderMaxDegree", defaults.remainder_max_degree),
        )

    @classmethod
    def from_json(cls, path: str) -> "ExampleOptions":
        """Load options from a JSON file."""
        with open(path) as f:
            return cls.from_dict(json.load(f))

    def to_proof_options(self, default_queries: int, default_blowup: int) -> tuple[ProofOptions, HashFunction]:
        """Resolve into proof options and a hash backend selector.

        Bounds are not checked here; examples validate at construction.

        Raises:
            ValueError: If hash_fn names no known backend
        """
        try:
            hash_fn = HashFunction(self.hash_fn)
        except ValueError:
            raise ValueError(
                f"Unknown hash function '{self.hash_fn}'. "
                f"Available: {[h.value for h in HashFunction]}"
            )

        options = ProofOptions(
            num_queries=self.num_queries if self.num_queries is not None else default_queries,
            blowup_factor=self.blowup_factor if self.blowup_factor is not None else default_blowup,
            grinding_factor=self.grinding_factor,
            fri_folding_factor=self.folding_factor,
            fri_remainder_max_degree=self.remainder_max_degree,
        )
        return options, hash_fn
