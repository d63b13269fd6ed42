"""
Cypher fragments used to resolve pagination cursors.

Graph layout: `(:Block)-[:next]->(:Block)` links each block to its successor
and `(:TX)-[:isAt]->(:Block)` attaches transactions to their block.
"""

from typing import List

# Boundary search: the until block itself when it has transactions, otherwise
# the nearest ancestor that does, then its first transaction. SHORTEST 1 stops
# expanding at the first block passing the inline filter.
UNTIL_CYPHER_TEMPLATE = """CALL {{
  MATCH SHORTEST 1 (untilBlock:Block{{hash:$untilBlock}})<-[:next]-{{0,{max_depth}}}(prevBlock:Block WHERE prevBlock.tx_count > 0)
  WITH prevBlock

  MATCH (prevBlock)<-[:isAt]-(untilTx:TX)
  RETURN untilTx, prevBlock AS untilBlockTx ORDER BY untilTx.tx_index LIMIT 1
}}"""

# Anchor search: both matches are optional so a missing block or transaction
# shows up as null instead of wiping out the boundary row.
AFTER_CYPHER = """CALL {
  OPTIONAL MATCH (afterBlock:Block{hash:$afterBlock})
  OPTIONAL MATCH (afterTx:TX{hash:$afterTx})-[:isAt]->(afterBlock)
  RETURN afterTx, afterBlock
}"""

UNTIL_RETURN_PARTS = [
    "ID(untilTx) as untilTx",
    "untilBlockTx.number as untilBlock",
]

AFTER_RETURN_PARTS = [
    "ID(afterTx) as afterTx",
    "afterTx.tx_index as afterTxIndex",
    "afterBlock.number as afterBlock",
]


def build_until_cypher(max_depth: int) -> str:
    if max_depth <= 0:
        raise ValueError(f"max_depth must be greater than 0, got {max_depth}")
    return UNTIL_CYPHER_TEMPLATE.format(max_depth=int(max_depth))


def build_pagination_query(max_depth: int, with_after: bool) -> str:
    """
    Joins the boundary fragment and, when requested, the anchor fragment into
    one query. The anchor fragment only adds columns.
    """
    match_parts: List[str] = [build_until_cypher(max_depth)]
    return_parts: List[str] = list(UNTIL_RETURN_PARTS)

    if with_after:
        match_parts.append(AFTER_CYPHER)
        return_parts.extend(AFTER_RETURN_PARTS)

    return "{}\nRETURN {}".format("\n".join(match_parts), ",".join(return_parts))

