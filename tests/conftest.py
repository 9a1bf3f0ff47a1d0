"""Shared schema fixtures.

No sys.path hacks - tests import from the installed canonql package.
"""

import pytest
from graphql import build_schema


MIXED_SDL = """
scalar Date

input Filter {
  limit: Int = 10
  after: Date
}

enum Color {
  RED
  GREEN
  BLUE
}

type Query {
  widgets(filter: Filter, first: Int): [Widget!]!
  node(id: ID!): Node
  search: SearchResult
}

union SearchResult = Widget | Gadget

type Widget implements Node {
  id: ID!
  color: Color
  madeOn: Date
}

type Gadget implements Node {
  "Nested parts."
  parts: [[Widget!]]!
  id: ID!
  legacyName: String @deprecated(reason: "Use id.")
}

interface Node {
  id: ID!
}
"""

# Same schema as MIXED_SDL, every declaration in a different order.
MIXED_SDL_REORDERED = """
interface Node {
  id: ID!
}

type Gadget implements Node {
  legacyName: String @deprecated(reason: "Use id.")
  id: ID!
  "Nested parts."
  parts: [[Widget!]]!
}

type Widget implements Node {
  madeOn: Date
  color: Color
  id: ID!
}

union SearchResult = Gadget | Widget

type Query {
  search: SearchResult
  node(id: ID!): Node
  widgets(first: Int, filter: Filter): [Widget!]!
}

enum Color {
  BLUE
  GREEN
  RED
}

input Filter {
  after: Date
  limit: Int = 10
}

scalar Date
"""

RECURSIVE_SDL = """
type Query {
  a: A
}

type B {
  a: A
}

type A {
  self: A
  b: B
  many: [A!]!
}
"""


@pytest.fixture
def mixed_schema():
    return build_schema(MIXED_SDL)


@pytest.fixture
def reordered_schema():
    return build_schema(MIXED_SDL_REORDERED)


@pytest.fixture
def recursive_schema():
    return build_schema(RECURSIVE_SDL)


@pytest.fixture
def mixed_sdl():
    return MIXED_SDL
