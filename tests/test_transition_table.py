import chainkov.transition_table


def test_new_table_is_empty () -> None:

	"""A new table has no sources."""

	table = chainkov.transition_table.TransitionTable()

	assert len(table) == 0
	assert table.edges == {}
	assert table.states() == []


def test_add_edge_creates_source () -> None:

	"""The first edge for a source creates a singleton list."""

	table = chainkov.transition_table.TransitionTable()
	table.add_edge("a", "b", 1.0)

	assert "a" in table
	assert table.get_transitions("a") == [("b", 1.0)]


def test_add_edge_appends_in_order () -> None:

	"""Distinct targets are kept in insertion order."""

	table = chainkov.transition_table.TransitionTable()
	table.add_edge("a", "c", 0.8)
	table.add_edge("a", "b", 0.19)
	table.add_edge("a", "a", 0.01)

	assert table.get_transitions("a") == [("c", 0.8), ("b", 0.19), ("a", 0.01)]


def test_add_edge_replaces_weight () -> None:

	"""Re-adding a target leaves one entry with the new weight."""

	table = chainkov.transition_table.TransitionTable()
	table.add_edge("s", "t", 0.3)
	table.add_edge("s", "u", 0.5)
	table.add_edge("s", "t", 0.9)

	transitions = table.get_transitions("s")

	assert len(transitions) == 2
	assert dict(transitions) == {"t": 0.9, "u": 0.5}


def test_add_edge_replace_moves_to_end () -> None:

	"""A replaced edge is re-appended after the untouched ones."""

	table = chainkov.transition_table.TransitionTable()
	table.add_edge("s", "t", 0.3)
	table.add_edge("s", "u", 0.5)
	table.add_edge("s", "t", 0.9)

	assert table.get_transitions("s") == [("u", 0.5), ("t", 0.9)]


def test_add_edge_accepts_any_weight () -> None:

	"""Zero and negative weights are stored without complaint."""

	table = chainkov.transition_table.TransitionTable()
	table.add_edge("s", "zero", 0)
	table.add_edge("s", "negative", -2)

	assert table.get_transitions("s") == [("zero", 0.0), ("negative", -2.0)]
	assert all(isinstance(weight, float) for _, weight in table.get_transitions("s"))


def test_increment_edge_new_source () -> None:

	"""Incrementing on an empty table creates the edge with weight 1.0."""

	table = chainkov.transition_table.TransitionTable()
	table.increment_edge("s", "t")

	assert table.edges == {"s": [("t", 1.0)]}


def test_increment_edge_keeps_position () -> None:

	"""Incrementing an existing edge updates it in place."""

	table = chainkov.transition_table.TransitionTable()
	table.add_edge("a", "b", 1.0)
	table.add_edge("a", "c", 1.0)
	table.add_edge("a", "d", 1.0)

	table.increment_edge("a", "b")
	table.increment_edge("a", "e")

	assert table.get_transitions("a") == [("b", 2.0), ("c", 1.0), ("d", 1.0), ("e", 1.0)]


def test_get_transitions_unknown_source () -> None:

	"""Unknown sources have no transitions."""

	table = chainkov.transition_table.TransitionTable()

	assert table.get_transitions("missing") == []
	assert "missing" not in table


def test_states_and_iteration () -> None:

	"""Sources are listed in the order they were first seen."""

	table = chainkov.transition_table.TransitionTable()
	table.add_edge("b", "a", 1.0)
	table.increment_edge("a", "b")
	table.add_edge("b", "c", 1.0)

	assert table.states() == ["b", "a"]
	assert list(table) == ["b", "a"]
	assert {source: table.get_transitions(source) for source in table} == table.edges


def test_edges_is_a_snapshot () -> None:

	"""Mutating the returned mapping does not touch the table."""

	table = chainkov.transition_table.TransitionTable()
	table.add_edge("a", "b", 1.0)

	snapshot = table.edges
	snapshot["a"].append(("z", 9.0))
	snapshot["new"] = []

	assert table.edges == {"a": [("b", 1.0)]}


def test_copy_is_independent () -> None:

	"""A copy compares equal but does not share storage."""

	table = chainkov.transition_table.TransitionTable()
	table.add_edge("a", "b", 1.0)

	clone = table.copy()
	assert clone == table

	clone.increment_edge("a", "b")
	clone.add_edge("x", "y", 1.0)

	assert table.edges == {"a": [("b", 1.0)]}
	assert clone != table


def test_equality_and_repr () -> None:

	"""Tables with the same edges are equal and repr shows the edges."""

	first = chainkov.transition_table.TransitionTable()
	second = chainkov.transition_table.TransitionTable()

	first.add_edge("a", "b", 1.0)
	second.increment_edge("a", "b")

	assert first == second
	assert first != "not a table"
	assert repr(first) == "TransitionTable({'a': [('b', 1.0)]})"
