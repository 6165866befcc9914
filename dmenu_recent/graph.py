from __future__ import annotations

from langgraph.graph import StateGraph, END

from .state import State
from .nodes import (
    read_input,
    resolve_file,
    load,
    write,
    report,
)


def build_graph():
    g = StateGraph(State)
    g.add_node("read_input", read_input)
    g.add_node("resolve_file", resolve_file)
    g.add_node("load", load)
    g.add_node("write", write)
    g.add_node("report", report)

    g.set_entry_point("read_input")
    g.add_edge("read_input", "resolve_file")
    g.add_edge("resolve_file", "load")
    g.add_edge("load", "write")

    def post_write(state: State):
        if state.get("no_output"):
            return "end"
        return "report"

    g.add_conditional_edges("write", post_write, {"report": "report", "end": END})
    g.add_edge("report", END)

    return g.compile()
