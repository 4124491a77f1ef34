def format_report(result, graph):
    """
    Render a PERT result as text.

    Args:
        result: A PERT analysis or a NotDAG result
        graph: The ProjectGraph that was analysed, used for vertex labels

    Returns:
        str: The report, one line per row
    """
    if not result.is_dag:
        return "Invalid graph: not a DAG"

    lines = [f"Number of critical vertices: {result.num_critical()}"]
    lines.append("u\tEC\tLC\tSlack\tCritical")
    for u in graph:
        lines.append(
            f"{graph.label(u)}\t{result.ec(u)}\t{result.lc(u)}\t"
            f"{result.slack(u)}\t{result.critical(u)}"
        )
    lines.append(f"Critical Path Length: {result.critical_path()}")

    path = result.critical_path_tasks()
    if path:
        lines.append(
            "Critical Path: " + " -> ".join(str(graph.label(u)) for u in path)
        )

    return "\n".join(lines)


def format_graph(graph):
    """
    Render the precedence graph, one line per task with its outgoing edges.

    Vertices are shown by label, so input files read back with 1-based numbers.
    """
    lines = [f"Graph: n: {graph.size()}, m: {graph.number_of_edges()}"]
    for u in graph:
        targets = " ".join(
            f"({graph.label(edge.from_vertex)},{graph.label(edge.to_vertex)})"
            for edge in graph.out_edges(u)
        )
        lines.append(f"{graph.label(u)}: {targets}".rstrip())
    return "\n".join(lines)
