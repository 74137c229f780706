from docindex.documento import Document


def test_new_document_counts_one():
    doc = Document("a.txt")
    assert doc.count == 1
    assert doc.name == "a.txt"


def test_increment_default_adds_one():
    doc = Document("a.txt")
    doc.increment()
    doc.increment()
    assert doc.count == 3


def test_increment_by_amount():
    doc = Document("a.txt")
    doc.increment(4)
    assert doc.count == 5


def test_increment_by_zero_keeps_count():
    doc = Document("a.txt", 7)
    doc.increment(0)
    assert doc.count == 7


def test_rank_key_orders_by_count_descending():
    docs = [Document("a", 1), Document("b", 5), Document("c", 3)]
    ranked = sorted(docs, key=Document.rank_key)
    assert [d.name for d in ranked] == ["b", "c", "a"]


def test_rank_key_breaks_ties_by_name():
    docs = [Document("zeta", 2), Document("alpha", 2), Document("mid", 2)]
    ranked = sorted(docs, key=Document.rank_key)
    assert [d.name for d in ranked] == ["alpha", "mid", "zeta"]


def test_rank_key_uses_negated_count():
    assert Document("x", 3).rank_key() == (-3, "x")


def test_documents_with_same_fields_are_equal():
    assert Document("d", 2) == Document("d", 2)
    assert not Document("d", 2) == Document("d", 3)