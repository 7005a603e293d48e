import matplotlib.pyplot as plt
import networkx as nx


def plot_cover(G, vertices, title, output_path=None, highlight_label="cover"):
    """
    Draw G with the given vertex set highlighted.

    Args:
        G: NetworkX graph
        vertices: Cover, clique or independent set to highlight
        title: Title for the plot
        output_path: Save the figure there instead of showing it
        highlight_label: Legend text for highlighted vertices
    """
    members = set(vertices)
    fig = plt.figure(figsize=(8, 6))

    pos = nx.spring_layout(G, seed=42)
    inside = [v for v in G.nodes() if v in members]
    outside = [v for v in G.nodes() if v not in members]

    nx.draw_networkx_nodes(G, pos, nodelist=inside, node_size=300, node_color="tab:red",
                           alpha=0.9, label=highlight_label)
    nx.draw_networkx_nodes(G, pos, nodelist=outside, node_size=300, node_color="lightgray", alpha=0.9)
    nx.draw_networkx_edges(G, pos, width=1.0, alpha=0.5)
    nx.draw_networkx_labels(G, pos, font_size=9)

    plt.title(f"{title} ({highlight_label} size {len(members)})")
    plt.axis('off')
    if inside:
        plt.legend(loc="best")

    if output_path is not None:
        fig.savefig(output_path, bbox_inches="tight")
        plt.close(fig)
    else:
        plt.show()
