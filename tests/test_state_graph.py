import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from hanoi.configuration import Configuration
from hanoi.errors import (
    ConfigurationNotFoundError,
    InvalidStateTransitionError,
    SearchLimitExceededError,
    UnreachableGoalError,
)
from hanoi.state_graph import StateGraph
from hanoi.strategies.frontier.fifo import FifoFrontier
from hanoi.strategies.generators.legal_moves import (
    LegalMoveGenerator,
    disk_is_movable,
    is_legal_destination,
)
from hanoi.vertex import Move, Vertex, VisitState


def _all_on(peg: int, disks: int) -> Configuration:
    return Configuration((peg,) * disks)


@pytest.mark.parametrize("disks", [1, 2, 3, 4, 5])
def test_classic_three_pegs(disks):
    graph = StateGraph(disks, 3)
    distance = graph.explore_and_find_distance(_all_on(0, disks), _all_on(2, disks))
    assert distance == 2 ** disks - 1


@pytest.mark.parametrize("disks,expected", [(1, 1), (2, 3), (3, 5), (4, 9)])
def test_four_pegs_frame_stewart(disks, expected):
    graph = StateGraph(disks, 4)
    assert graph.explore_and_find_distance(_all_on(0, disks), _all_on(3, disks)) == expected


def test_zero_distance():
    graph = StateGraph(3, 3)
    config = Configuration((1, 0, 2))
    assert graph.explore_and_find_distance(config, config) == 0
    start = graph.vertex(graph.lookup_settled_vertex(config))
    assert start.predecessor is None
    assert start.last_move is None
    assert start.visit_state is VisitState.SETTLED


def test_get_or_create_vertex_dedup():
    graph = StateGraph(2, 3)
    a = graph.get_or_create_vertex(Configuration((0, 1)))
    b = graph.get_or_create_vertex(Configuration((2, 2)))
    again = graph.get_or_create_vertex(Configuration((0, 1)))

    assert (a, b) == (0, 1)
    assert again == a
    assert graph.num_vertices() == 2

    vertex = graph.vertex(b)
    assert vertex.visit_state is VisitState.UNVISITED
    assert vertex.distance == 0
    assert vertex.predecessor is None


def test_lookup_missing_configuration():
    graph = StateGraph(2, 3)
    with pytest.raises(ConfigurationNotFoundError):
        graph.lookup_settled_vertex(Configuration((1, 1)))


def test_edges_are_symmetric_and_unique():
    graph = StateGraph(4, 3)
    graph.explore_and_find_distance(_all_on(0, 4), _all_on(2, 4))

    total = 0
    for u in range(graph.num_vertices()):
        for v in graph.neighbors(u):
            assert u in graph.neighbors(v), f"Ребро {u}-{v} записано только с одной стороны"
            total += 1
    assert total == 2 * graph.num_edges()


def test_distances_follow_predecessors():
    graph = StateGraph(4, 4)
    graph.explore_and_find_distance(_all_on(0, 4), _all_on(3, 4))

    for u in range(graph.num_vertices()):
        vertex = graph.vertex(u)
        if vertex.visit_state is VisitState.UNVISITED or vertex.predecessor is None:
            continue
        parent = graph.vertex(vertex.predecessor)
        assert vertex.distance == parent.distance + 1
        assert u in parent.neighbors
        # last_move переводит конфигурацию предка в конфигурацию вершины
        changed = [
            d for d, (p, q) in enumerate(zip(parent.configuration.pegs, vertex.configuration.pegs)) if p != q
        ]
        assert len(changed) == 1
        disk = changed[0]
        assert vertex.last_move == Move(parent.configuration[disk] + 1, vertex.configuration[disk] + 1)


def test_vertex_count_bounded_by_state_space():
    disks, pegs = 3, 4
    graph = StateGraph(disks, pegs)
    graph.explore_and_find_distance(_all_on(0, disks), _all_on(3, disks))
    assert graph.num_vertices() <= pegs ** disks


def test_explore_resets_previous_search():
    graph = StateGraph(3, 3)
    graph.explore_and_find_distance(_all_on(0, 3), _all_on(2, 3))
    first = graph.num_vertices()
    graph.explore_and_find_distance(_all_on(0, 3), _all_on(0, 3))
    # при нулевом расстоянии раскрыт только старт и его соседи
    assert graph.num_vertices() < first
    assert graph.stats()["vertices_settled"] == 1


def test_two_pegs_two_disks_unreachable():
    graph = StateGraph(2, 2)
    with pytest.raises(UnreachableGoalError):
        graph.explore_and_find_distance(_all_on(0, 2), _all_on(1, 2))


def test_max_vertices_limit():
    graph = StateGraph(6, 3)
    with pytest.raises(SearchLimitExceededError):
        graph.explore_and_find_distance(_all_on(0, 6), _all_on(2, 6), max_vertices=10)


def test_symmetric_distance():
    a = Configuration((0, 1, 2, 0))
    b = Configuration((2, 2, 1, 1))
    forward = StateGraph(4, 3).explore_and_find_distance(a, b)
    backward = StateGraph(4, 3).explore_and_find_distance(b, a)
    assert forward == backward


def test_move_predicates():
    config = Configuration((0, 0, 1))
    # диск 0 сверху на стержне 0, диск 1 под ним
    assert disk_is_movable(config, 0)
    assert not disk_is_movable(config, 1)
    assert disk_is_movable(config, 2)

    assert is_legal_destination(config, 0, 1)
    assert not is_legal_destination(config, 0, 0)
    assert not is_legal_destination(config, 2, 0)
    assert is_legal_destination(config, 2, 2)


def test_generator_order():
    generator = LegalMoveGenerator(3)
    moves = [(src, dst) for src, dst, _ in generator.neighbors(Configuration((0, 0, 1)))]
    assert moves == [(0, 1), (0, 2), (1, 2)]


def test_fifo_frontier_order():
    frontier = FifoFrontier()
    assert frontier.empty()
    for vertex_id in (4, 1, 7):
        frontier.push(vertex_id)
    assert len(frontier) == 3
    assert frontier.peek() == 4
    assert [frontier.pop() for _ in range(3)] == [4, 1, 7]
    assert frontier.empty()


def test_visit_state_is_monotonic():
    vertex = Vertex(configuration=Configuration((0,)), index=0)
    with pytest.raises(InvalidStateTransitionError):
        vertex.mark_settled()

    vertex.mark_frontier(distance=0)
    with pytest.raises(InvalidStateTransitionError):
        vertex.mark_frontier(distance=3, predecessor=7)
    assert vertex.distance == 0
    assert vertex.predecessor is None

    vertex.mark_settled()
    with pytest.raises(InvalidStateTransitionError):
        vertex.mark_settled()
