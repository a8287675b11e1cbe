
import pytest

from add_edge import add_edge
from node import Node


@pytest.fixture
def simple_rows():
    #      2,3          6
    #  A ───────► B ───────► E
    #  D ───────► C ───────► E,F
    #      0,1         4,5
    E, F = Node(name="E"), Node(name="F")
    B, C = Node(name="B"), Node(name="C")
    add_edge(B, E, 6)
    add_edge(C, E, 4)
    add_edge(C, F, 5)
    A, D = Node(name="A"), Node(name="D")
    add_edge(A, B, 2)
    add_edge(A, C, 3)
    add_edge(D, B, 0)
    add_edge(D, C, 1)
    return [[A, D], [B, C], [E, F]]
