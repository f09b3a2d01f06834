"""Tests for DOT export."""
import enum
import io

from lexfsm import FSM, EdgeFlag, GraphStyle, dump_graph, escape_label, to_dot


class S(enum.IntEnum):
    IDLE = 0
    WORD = 1
    SPACE = 2


def _build():
    fsm = FSM(S.IDLE)
    fsm.set_state_name(S.WORD, "word")
    fsm.create_edge(S.IDLE, S.WORD, str.isalpha, "\\w")
    fsm.create_edge(S.WORD, S.WORD, str.isalpha, "\\w")
    fsm.create_global_edge(S.SPACE, " ", " ", EdgeFlag.SILENT)
    return fsm


class TestEscapeLabel:
    def test_doubles_backslashes(self):
        assert escape_label("\\d") == "\\\\d"
        assert escape_label("\\") == "\\\\"
        assert escape_label("a-z") == "a-z"


class TestToDot:
    """Test cases for to_dot."""

    def test_full_output(self):
        """Nodes, local arcs and fanned-out global arcs in order."""
        # Arrange
        fsm = _build()

        # Act
        text = to_dot(fsm)

        # Assert
        assert text == (
            "digraph G {\n"
            '\t0 [shape=box label="0"]\n'
            '\t1 [shape=box label="word (1)"]\n'
            '\t2 [shape=box label="2"]\n'
            "\n"
            '\t0 -> 1 [style=solid label="\\\\w"]\n'
            '\t1 -> 1 [style=solid label="\\\\w"]\n'
            '\t0 -> 2 [style=dotted label=" "]\n'
            '\t1 -> 2 [style=dotted label=" "]\n'
            '\t2 -> 2 [style=dotted label=" "]\n'
            "}\n"
        )

    def test_accepts_graph_view(self):
        fsm = _build()

        assert to_dot(fsm.graph()) == to_dot(fsm)

    def test_string_states_are_quoted(self):
        """Non-integer ids are quoted, double quotes in labels are escaped."""
        fsm = FSM("start")
        fsm.create_edge("start", "quoted", '"', '"')

        text = to_dot(fsm)

        assert '\t"start" [shape=box label="start"]\n' in text
        assert '\t"start" -> "quoted" [style=solid label="\\""]\n' in text

    def test_custom_style(self):
        fsm = _build()
        style = GraphStyle(name="lexer", node_shape="ellipse", silent_style="dashed")

        text = to_dot(fsm, style)

        assert text.startswith("digraph lexer {\n")
        assert "shape=ellipse" in text
        assert "style=dashed" in text
        assert "style=dotted" not in text

    def test_dump_graph_writes_file(self):
        fsm = _build()
        buf = io.StringIO()

        dump_graph(fsm, buf)

        assert buf.getvalue() == to_dot(fsm)


class TestGraphView:
    """Test cases for FSM.graph."""

    def test_view_is_a_snapshot(self):
        """Edges added after graph() do not show up in the view."""
        fsm = _build()
        view = fsm.graph()

        fsm.create_edge(S.SPACE, S.IDLE, "x", "x")

        assert len(view.edges) == 2
        assert len(fsm.graph().edges) == 3

    def test_view_contents(self):
        fsm = _build()
        view = fsm.graph()

        assert view.default_state == S.IDLE
        assert view.states == (S.IDLE, S.WORD, S.SPACE)
        assert view.state_names[S.WORD] == "word"
        assert all(edge.is_global for edge in view.global_edges)
