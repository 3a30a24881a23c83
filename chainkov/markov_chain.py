import bisect
import itertools
import logging
import math
import random
import typing

import chainkov.transition_table


logger = logging.getLogger(__name__)

# Returned by next_state() for a state with no known successors.
EMPTY_STATE = ""


class InvalidWeightDistribution (ValueError):

	"""
	Raised when a state's edges cannot be sampled because of their weights.

	This happens when the total weight is zero or negative, or when any
	single weight is negative or infinite. It is a data problem reachable
	through normal use (e.g. ``add_edge("a", "b", 0.0)`` followed by ``next_state("a")``),
	so it is raised to the caller rather than resolved with a default choice.
	"""


def choose_weighted (options: typing.Sequence[typing.Tuple[str, float]], rng: random.Random) -> str:

	"""
	Choose one item from a list of weighted options.

	Each option is picked with probability ``weight / total``. Cumulative
	weights are built once and a single uniform draw over ``[0, total)`` is
	located with a binary search, so zero-weight options (which occupy an
	empty interval) are never selected.

	Parameters:
		options: ``(item, weight)`` pairs. Weights are relative and need not
			sum to 1.
		rng: The random source to draw from.

	Raises:
		ValueError: If ``options`` is empty.
		InvalidWeightDistribution: If any weight is negative or infinite, or
			the total weight is not strictly positive.
	"""

	if not options:
		raise ValueError("Options cannot be empty")

	for item, weight in options:
		if weight < 0 or not math.isfinite(weight):
			raise InvalidWeightDistribution(f"Weight for {item!r} must be finite and not negative (got {weight})")

	weights = [weight for _, weight in options]
	cumulative = list(itertools.accumulate(weights))

	# Finite weights can still overflow when summed; rescale by the largest.
	if math.isinf(cumulative[-1]):
		largest = max(weights)
		cumulative = list(itertools.accumulate(weight / largest for weight in weights))

	total_weight = cumulative[-1]

	if total_weight <= 0:
		raise InvalidWeightDistribution(f"Total weight must be positive (got {total_weight})")

	roll = rng.random() * total_weight
	index = bisect.bisect_right(cumulative, roll)

	# Float rounding can land the roll on the upper bound.
	if index >= len(options):
		index = max(i for i, (_, weight) in enumerate(options) if weight > 0)

	return options[index][0]


class MarkovChain:

	"""
	A first-order weighted Markov chain over string states.

	The chain owns a :class:`~chainkov.transition_table.TransitionTable` and a
	random source. Build it with ``add_edge()`` (explicit weights) or
	``increment_edge()`` / ``observe()`` (frequency counts), then walk it with
	``next_state()`` or ``generate_states()``.

	Example:
		```python
		chain = chainkov.MarkovChain(rng=random.Random(7))
		chain.add_edge("a", "b", 1.0)
		chain.add_edge("b", "c", 1.0)
		chain.add_edge("c", "a", 1.0)

		chain.generate_states("a", 6)  # ['b', 'c', 'a', 'b', 'c', 'a']
		```

	The chain is not thread-safe. Callers sharing one chain between threads
	must guard it themselves.
	"""

	def __init__ (
		self,
		table: typing.Optional[chainkov.transition_table.TransitionTable] = None,
		rng: typing.Optional[random.Random] = None
	) -> None:

		"""
		Initialize the chain with an optional existing table and random source.

		Parameters:
			table: Transitions to start from. A new empty table is created
				when omitted. The table is used directly, not copied.
			rng: Random source for sampling. Pass a seeded
				``random.Random`` for repeatable walks.
		"""

		self.table = table if table is not None else chainkov.transition_table.TransitionTable()
		self.rng = rng or random.Random()


	@property
	def edges (self) -> typing.Dict[str, chainkov.transition_table.EdgeList]:

		"""
		A snapshot of the chain's transitions (see ``TransitionTable.edges``).
		"""

		return self.table.edges


	def add_edge (self, source: str, target: str, weight: float) -> None:

		"""
		Insert or replace the weighted edge ``source -> target``.

		A replaced edge keeps a single entry but its position among the
		source's successors is not guaranteed.
		"""

		self.table.add_edge(source, target, weight)


	def increment_edge (self, source: str, target: str) -> None:

		"""
		Count one more observed ``source -> target`` transition.
		"""

		self.table.increment_edge(source, target)


	def observe (self, states: typing.Iterable[str]) -> None:

		"""
		Count every consecutive pair in an already-tokenized sequence.

		``observe(["a", "b", "a"])`` is equivalent to incrementing
		``a -> b`` and then ``b -> a``.
		"""

		previous: typing.Optional[str] = None

		for state in states:

			if previous is not None:
				self.table.increment_edge(previous, state)

			previous = state


	def next_state (self, current: str) -> str:

		"""
		Sample a successor of ``current`` according to its edge weights.

		Returns ``EMPTY_STATE`` when ``current`` has no outgoing edges.

		Raises:
			InvalidWeightDistribution: If the edges of ``current`` cannot be
				sampled (non-positive total weight or a negative or infinite weight).
		"""

		options = self.table.get_transitions(current)

		if not options:
			logger.debug(f"No transitions from {current!r}")
			return EMPTY_STATE

		try:
			return choose_weighted(options, self.rng)

		except InvalidWeightDistribution as exc:
			raise InvalidWeightDistribution(f"Cannot sample from state {current!r}: {exc}") from exc


	def generate_states (self, start: str, count: int) -> typing.List[str]:

		"""
		Walk the chain ``count`` steps from ``start`` and return the states visited.

		The result always has exactly ``count`` items and never includes
		``start``. Once the walk reaches a state with no outgoing edges it
		does not stop: every remaining item is ``EMPTY_STATE``.
		"""

		if count < 0:
			raise ValueError(f"Count must not be negative (got {count})")

		states: typing.List[str] = []
		current = start

		for _ in range(count):
			current = self.next_state(current)
			states.append(current)

		return states


	def __eq__ (self, other: object) -> bool:

		if not isinstance(other, MarkovChain):
			return NotImplemented

		return self.table == other.table


	def __repr__ (self) -> str:
		return f"MarkovChain({self.table.edges!r})"
