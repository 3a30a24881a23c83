import logging
import typing


logger = logging.getLogger(__name__)

EdgeList = typing.List[typing.Tuple[str, float]]


class TransitionTable:

	"""
	A weighted transition table mapping each source state to its successors.

	Successors are kept in insertion order. Replacing an existing edge with
	``add_edge()`` moves it to the end, so enumeration order is only stable
	for edges that were never replaced. ``increment_edge()`` never reorders.
	"""

	def __init__ (self) -> None:

		"""
		Initialize an empty table.
		"""

		self._edges: typing.Dict[str, typing.Dict[str, float]] = {}


	def add_edge (self, source: str, target: str, weight: float) -> None:

		"""
		Insert a weighted edge, replacing the weight of an existing one.

		Weights are not validated - zero and negative values are stored as
		given and only rejected when the source state is sampled.
		"""

		if source not in self._edges:
			self._edges[source] = {}

		successors = self._edges[source]

		# Replacement re-inserts the target so it lands at the end.
		if target in successors:
			del successors[target]

		successors[target] = float(weight)

		logger.debug(f"Edge {source!r} -> {target!r} set to {weight}")


	def increment_edge (self, source: str, target: str) -> None:

		"""
		Add 1.0 to an edge's weight, creating it with weight 1.0 if missing.
		"""

		if source not in self._edges:
			self._edges[source] = {}

		successors = self._edges[source]
		successors[target] = successors.get(target, 0.0) + 1.0

		logger.debug(f"Edge {source!r} -> {target!r} incremented to {successors[target]}")


	def get_transitions (self, source: str) -> EdgeList:

		"""
		Return weighted transitions for a source state.
		"""

		if source not in self._edges:
			return []

		return list(self._edges[source].items())


	def states (self) -> typing.List[str]:

		"""
		Return every source state that has at least one edge.
		"""

		return list(self._edges)


	@property
	def edges (self) -> typing.Dict[str, EdgeList]:

		"""
		A snapshot of the whole table as ``source -> [(target, weight), ...]``.

		The returned dictionary is a copy; mutating it does not affect the table.
		"""

		return {source: list(successors.items()) for source, successors in self._edges.items()}


	def copy (self) -> "TransitionTable":

		"""
		Return an independent copy of this table.
		"""

		clone = TransitionTable()
		clone._edges = {source: dict(successors) for source, successors in self._edges.items()}

		return clone


	def __len__ (self) -> int:
		return len(self._edges)

	def __contains__ (self, source: object) -> bool:
		return source in self._edges

	def __iter__ (self) -> typing.Iterator[str]:
		return iter(list(self._edges))


	def __eq__ (self, other: object) -> bool:

		if not isinstance(other, TransitionTable):
			return NotImplemented

		return self.edges == other.edges


	def __repr__ (self) -> str:
		return f"TransitionTable({self.edges!r})"
