import heapq
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from board import Board, CellState, Coordinate, in_bounds, read_board

logger = logging.getLogger(__name__)

# Unit moves in expansion order: up, left, down, right.
DELTAS: Tuple[Tuple[int, int], ...] = ((-1, 0), (0, -1), (1, 0), (0, 1))


def heuristic(a: Coordinate, b: Coordinate) -> int:
    """
    Manhattan distance between two cells. Admissible and consistent for
    4-connected moves of cost 1.
    """
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@dataclass(frozen=True)
class Node:
    """
    Open-list entry: cell (x, y), cost so far g and estimate to goal h.
    """

    x: int
    y: int
    g: int
    h: int

    @property
    def f(self) -> int:
        return self.g + self.h

    @property
    def coord(self) -> Coordinate:
        return (self.x, self.y)


class OpenSet:
    """
    Frontier of queued nodes, popped by lowest f.

    Ties are broken by lower h (the node closer to the goal), then by
    insertion order.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[int, int, int, Node]] = []
        self._seq = 0

    def insert(self, node: Node) -> None:
        heapq.heappush(self._heap, (node.f, node.h, self._seq, node))
        self._seq += 1

    def extract_best(self) -> Node:
        """
        Remove and return the best node. Raises IndexError when empty.
        """
        return heapq.heappop(self._heap)[-1]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


class SearchStatus(Enum):
    FOUND = "found"
    EXHAUSTED = "exhausted"


@dataclass
class SearchResult:
    """
    Outcome of a search.

    board is the solved board (mutated in place) when status is FOUND and an
    empty list when EXHAUSTED. Check status, not the board, to tell them apart.
    cost is the number of moves from start to goal, None if not found.
    """

    status: SearchStatus
    board: Board = field(default_factory=list)
    expanded: int = 0
    open_remaining: int = 0
    cost: Optional[int] = None

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.FOUND


def check_valid_cell(board: Board, x: int, y: int) -> bool:
    """
    Return True if (x, y) is on the board and the cell is still EMPTY.
    The bounds test runs first so we never index outside the board.
    """
    return in_bounds(board, (x, y)) and board[x][y] == CellState.EMPTY


def add_to_open(node: Node, open_set: OpenSet, board: Board) -> None:
    """
    Queue node and close its cell right away, so no other expansion can
    queue the same cell again.
    """
    open_set.insert(node)
    board[node.x][node.y] = CellState.CLOSED


def expand_neighbors(
    node: Node,
    goal: Coordinate,
    open_set: OpenSet,
    board: Board,
) -> int:
    """
    Queue every valid 4-connected neighbor of node.

    Returns
    -------
    count : number of neighbors added to the open set.
    """
    added = 0
    for dx, dy in DELTAS:
        nx, ny = node.x + dx, node.y + dy
        if check_valid_cell(board, nx, ny):
            nb = Node(nx, ny, node.g + 1, heuristic((nx, ny), goal))
            add_to_open(nb, open_set, board)
            added += 1
    return added


def search(board: Board, start: Coordinate, goal: Coordinate) -> SearchResult:
    """
    Run A* on a board of cell states.

    The board is modified in place: queued cells become CLOSED, expanded
    cells become PATH, and on success the endpoints become START and FINISH.
    No parent links are kept, so no ordered path is returned.

    Parameters
    ----------
    board : Board
        Board to search. Rows may have different lengths.
    start, goal : (x, y) tuples
        Must index existing cells.

    Returns
    -------
    result : SearchResult with status FOUND and the marked board, or
        EXHAUSTED and an empty board if the goal cannot be reached.

    Raises
    ------
    ValueError
        If start or goal lies outside the board, or start is an obstacle.
    """
    for name, coord in (("start", start), ("goal", goal)):
        if not in_bounds(board, coord):
            raise ValueError(f"{name} {coord} is outside the board")
    if board[start[0]][start[1]] == CellState.OBSTACLE:
        raise ValueError(f"start {start} is an obstacle")

    open_set = OpenSet()
    add_to_open(Node(start[0], start[1], 0, heuristic(start, goal)), open_set, board)
    expanded = 0

    while open_set:
        current = open_set.extract_best()
        board[current.x][current.y] = CellState.PATH
        expanded += 1

        if current.coord == tuple(goal):
            board[start[0]][start[1]] = CellState.START
            board[goal[0]][goal[1]] = CellState.FINISH
            logger.debug(
                "Reached goal %s with g=%d after %d expansions",
                goal, current.g, expanded,
            )
            return SearchResult(
                SearchStatus.FOUND, board, expanded, len(open_set), current.g
            )

        expand_neighbors(current, goal, open_set, board)

    logger.info("No path found from %s to %s", start, goal)
    return SearchResult(SearchStatus.EXHAUSTED, [], expanded, len(open_set))


def count_path_cells(board: Board) -> int:
    """
    Count cells marked PATH, START or FINISH.
    """
    marked = (CellState.PATH, CellState.START, CellState.FINISH)
    return sum(cell in marked for row in board for cell in row)


def solve_board(path: str, start: Coordinate, goal: Coordinate) -> SearchResult:
    """
    High-level helper:
    1. Read the board file.
    2. Run A* from start to goal.

    An empty or missing board is reported as EXHAUSTED without searching.
    """
    board = read_board(path)
    if not board:
        logger.warning("Board %s is empty, nothing to search", path)
        return SearchResult(SearchStatus.EXHAUSTED)
    return search(board, start, goal)
