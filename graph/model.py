"""Graph data model for file and component dependency relationships."""

from typing import Iterator, List, NamedTuple, Optional, Tuple, Union


class NodeType:
    """Node variant tags."""

    FILE = "file"
    COMPONENT = "component"


class EdgeKind:
    """Edge kind tags."""

    DEFINES = "defines"
    IMPORTS = "imports"
    USES = "uses"

    ALL = (DEFINES, IMPORTS, USES)


class ImportBinding(NamedTuple):
    """A single name bound by an import statement."""

    kind: str  # "default" or "named"
    name: str


class RawImport(NamedTuple):
    """An import target as written in the source, before resolution."""

    path: str
    bindings: Tuple[ImportBinding, ...] = ()


class ComponentNode(NamedTuple):
    """A logical component, keyed by name."""

    id: int
    name: str
    defined_in: str

    @property
    def type(self) -> str:
        return NodeType.COMPONENT


class Edge(NamedTuple):
    """A directed edge between two node ids."""

    source: int
    target: int
    kind: str


class Group(NamedTuple):
    """A traversed directory. Informational only, never referenced by edges."""

    id: int
    name: str
    path: str
    parent_path: str


class FileNode:
    """
    A source file in the project.

    ``component_names`` and ``imports`` are only appended to during the
    extraction pass that creates the node.
    """

    type = NodeType.FILE

    def __init__(self, id: int, path: str, name: str):
        self.id = id
        self.path = path
        self.name = name
        self.component_names: List[str] = []
        self.imports: List[RawImport] = []

    def __eq__(self, other) -> bool:
        if not isinstance(other, FileNode):
            return NotImplemented
        return (
            self.id == other.id
            and self.path == other.path
            and self.name == other.name
            and self.component_names == other.component_names
            and self.imports == other.imports
        )

    def __repr__(self) -> str:
        return f"FileNode(id={self.id}, path={self.path!r}, components={self.component_names!r}, imports={len(self.imports)})"


Node = Union[FileNode, ComponentNode]


class ProjectGraph:
    """
    A directed graph of files and the components they declare.

    Nodes, edges and groups are append-only. A node's id is its index in the
    node list, so ids stay dense across both node variants.
    """

    def __init__(self):
        self._nodes: List[Node] = []
        self._edges: List[Edge] = []
        self._groups: List[Group] = []

    @property
    def nodes(self) -> List[Node]:
        """Return all nodes in insertion order."""
        return list(self._nodes)

    @property
    def edges(self) -> List[Edge]:
        """Return all edges in insertion order."""
        return list(self._edges)

    @property
    def groups(self) -> List[Group]:
        """Return all directory groups in traversal order."""
        return list(self._groups)

    def add_file_node(self, path: str, name: str) -> FileNode:
        """
        Append a new file node.

        Uniqueness of ``path`` is the caller's concern; the build context keeps
        the path index.

        Args:
            path: Project-relative POSIX path.
            name: Display name.

        Returns:
            The created node.
        """
        node = FileNode(len(self._nodes), path, name)
        self._nodes.append(node)
        return node

    def add_component_node(self, name: str, defined_in: str) -> ComponentNode:
        """Append a new component node declared by the file at ``defined_in``."""
        node = ComponentNode(len(self._nodes), name, defined_in)
        self._nodes.append(node)
        return node

    def add_edge(self, source: int, target: int, kind: str) -> Edge:
        """
        Append a directed edge.

        Duplicate edges are kept. Both endpoints must already exist.

        Raises:
            ValueError: If an endpoint id is unknown or the kind is invalid.
        """
        if kind not in EdgeKind.ALL:
            raise ValueError(f"Unknown edge kind: {kind!r}")
        for node_id in (source, target):
            if not 0 <= node_id < len(self._nodes):
                raise ValueError(f"Edge endpoint {node_id} is not a node in this graph")
        edge = Edge(source, target, kind)
        self._edges.append(edge)
        return edge

    def add_group(self, name: str, path: str, parent_path: str) -> Group:
        """Append a directory group."""
        group = Group(len(self._groups), name, path, parent_path)
        self._groups.append(group)
        return group

    def get_node(self, node_id: int) -> Node:
        """Get a node by id."""
        return self._nodes[node_id]

    def file_nodes(self) -> List[FileNode]:
        """Return file nodes in insertion order."""
        return [node for node in self._nodes if node.type == NodeType.FILE]

    def component_nodes(self) -> List[ComponentNode]:
        """Return component nodes in insertion order."""
        return [node for node in self._nodes if node.type == NodeType.COMPONENT]

    def iter_edges(self, kind: Optional[str] = None) -> Iterator[Edge]:
        """Iterate over edges, optionally only those of one kind."""
        for edge in self._edges:
            if kind is None or edge.kind == kind:
                yield edge

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._nodes)

    def __repr__(self) -> str:
        files = len(self.file_nodes())
        return (
            f"ProjectGraph(files={files}, components={len(self._nodes) - files}, "
            f"edges={len(self._edges)}, groups={len(self._groups)})"
        )
