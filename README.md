# influencegraph

Tools for analysing who influences whom in a directed social graph, such as
a follower network read from an edge list.

The package offers three pieces of analysis:

- **SCC/CAC partitioning** (`influencegraph.partition`): an iterative
  depth-first walk that groups vertices into strongly connected components
  (SCC). Single-vertex components are marked as acyclic components (CAC).
  Every vertex gets a level.
- **Influence power** (`influencegraph.influence`): a damped score based on
  followers. It combines edge weights, whether two users share an interest
  category, and how many followers they have in common.
- **Serial interaction scoring** (`influencegraph.serial`): a score that
  propagates over retweet, reply and mention counts.

It depends on nothing outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Input formats

The partitioning and influence tools read an edge list. The file may be plain
text or gzip-compressed; gzip files are recognised by their magic bytes. Each
line has the form `source target [weight]`. Lines that do not start with two
integers are skipped. The weight is `1.0` when it is missing or cannot be read
as a number.

The serial scorer reads whitespace-separated integers in groups of five:
`source target retweets replies mentions`. It stops at the first token that is
not an integer.

## Command line

```
influencegraph [EDGE_LIST] [--seed N]
```

This runs the whole pipeline. It partitions the graph and prints the SCC/CAC
statistics. It then computes influence power and prints a summary and the ten
most influential users. `--seed` makes the random interest categories
repeatable. `EDGE_LIST` defaults to `higgs-social_network.edgelist.gz`. The
exit status is 1 if the file cannot be opened.

```
influencegraph-partition [EDGE_LIST] [--size N]
```

This runs only the SCC/CAC partitioning and prints the graph statistics. The
vertices are split into `N` equal shares (default 1), and only the first share
is walked. The exit status is 1 if the file cannot be opened and 2 if `--size`
is not positive.

```
influencegraph-serial [INTERACTION_LIST] [--steps N] [--top N]
```

This scores users from their interaction counts. It uses 3 propagation steps
by default and prints the 10 highest scores by default. `INTERACTION_LIST`
defaults to `combined_higgs_dataset.edgelist`. The exit status is 1 if the
file is missing or holds no records.

## Library use

```python
import random

from influencegraph.partition import Graph
from influencegraph.influence import from_partition_graph

graph = Graph()
graph.add_edge(1, 2, 1.0)
graph.add_edge(2, 1, 1.0)
graph.add_edge(2, 3, 1.0)
graph.partition()
print(graph.stats().format())
print(graph.component_of(3))

influence = from_partition_graph(graph, random.Random(0))
influence.calculate_influence_power(4, 0.85)
print(influence.top_k(3))
print(influence.summary())
```

`load_graph(path)` builds a `Graph` from an edge-list file.
`read_edge_list(path)` yields `(source, target, weight)` tuples from such a
file. `partition_slice(graph, rank, size)` walks only the vertices in one
worker's share.

Interest categories are drawn at random when vertices are added to an
`InfluenceGraph`. Pass your own `random.Random` to get results you can repeat.

To score interaction counts:

```python
from influencegraph.serial import read_graph, calculate_influence, top_influencers

graph = read_graph("interactions.edgelist")
scores = calculate_influence(graph, 3)
for user, score in top_influencers(scores, 10):
    print(user, score)
```

`run_pipeline(path, rng)` in `influencegraph.cli` returns the full report of
the `influencegraph` command as a string.

## Limitations

All work runs in a single process. The `workers` argument of
`calculate_influence_power` and the `rank`/`size` arguments of
`partition_slice` only decide how vertices are divided into blocks. Nothing
runs in parallel, and no results are exchanged between processes.