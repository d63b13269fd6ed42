import pytest

from storage.neo4j.queries import AFTER_CYPHER, build_pagination_query, build_until_cypher


def test_until_only_query():
    query = build_pagination_query(max_depth=100, with_after=False)

    assert query.startswith(build_until_cypher(100))
    assert AFTER_CYPHER not in query
    assert query.endswith("RETURN ID(untilTx) as untilTx,untilBlockTx.number as untilBlock")


def test_after_fragment_only_adds_columns():
    until_only = build_pagination_query(max_depth=100, with_after=False)
    with_after = build_pagination_query(max_depth=100, with_after=True)

    assert with_after.startswith(build_until_cypher(100))
    assert AFTER_CYPHER in with_after
    assert "afterTx.tx_index as afterTxIndex" in with_after
    assert until_only.split("RETURN ")[-1] in with_after.split("\nRETURN ")[-1]


def test_until_cypher_walks_back_from_the_block_itself():
    cypher = build_until_cypher(50)

    assert "MATCH SHORTEST 1 (untilBlock:Block{hash:$untilBlock})" in cypher
    assert "<-[:next]-{0,50}(prevBlock:Block WHERE prevBlock.tx_count > 0)" in cypher
    assert "ORDER BY depth" not in cypher
    assert "ORDER BY untilTx.tx_index LIMIT 1" in cypher
    assert "{{" not in cypher


def test_invalid_depth_is_rejected():
    with pytest.raises(ValueError, match="max_depth must be greater than 0"):
        build_until_cypher(0)
