from apollo_client.errors import DuplicateArticleError, MalformedInputError
from apollo_client.schemas import Article, ClusteringResultItem
from apollo_client.services.identity_validator import ByIdentity, Full, as_article_ref, validate_identities


def _present(article_id: str, related: list[str] | None = None) -> dict:
    return {"article": {"id": article_id, "content": f"Body of {article_id}"}, "related": related or []}


def test_disjoint_collections_pass():
    outcome = validate_identities(["a2", Article(id="a3", content="New story")], [_present("a1")])

    assert outcome.ok
    assert outcome.error is None


def test_overlap_reports_duplicate_ids():
    outcome = validate_identities(["a1", "a2"], [_present("a1")])

    assert not outcome.ok
    assert isinstance(outcome.error, DuplicateArticleError)
    assert outcome.error.ids == ["a1"]


def test_duplicates_listed_in_new_article_order():
    present = [_present("a"), _present("b")]

    outcome = validate_identities(["b", "c", "a", "b"], present)

    assert outcome.error.ids == ["b", "a"]


def test_full_articles_and_models_are_projected_to_ids():
    present = [ClusteringResultItem(article=Article(id="x1", content="Clustered"), related=["x2"])]

    outcome = validate_identities([{"id": "x1", "content": "Again"}], present)

    assert isinstance(outcome.error, DuplicateArticleError)
    assert outcome.error.ids == ["x1"]


def test_missing_article_id_is_malformed():
    present = [_present("a1"), {"article": {"content": "no id"}, "related": []}]

    outcome = validate_identities(["a9"], present)

    assert isinstance(outcome.error, MalformedInputError)
    assert outcome.error.index == 1
    assert outcome.error.collection == "present_articles"


def test_missing_article_is_malformed():
    outcome = validate_identities(["a9"], [{"related": ["a1"]}])

    assert isinstance(outcome.error, MalformedInputError)
    assert outcome.error.index == 0


def test_malformed_check_takes_precedence_over_duplicates():
    present = [_present("a1"), {"article": {"id": "", "content": "blank"}}]

    outcome = validate_identities(["a1"], present)

    assert isinstance(outcome.error, MalformedInputError)
    assert outcome.error.index == 1


def test_repeated_ids_within_new_articles_are_not_checked():
    outcome = validate_identities(["a1", "a1"], [_present("a2")])

    assert outcome.ok


def test_article_reference_variants():
    article = Article(id="full-1", content="Text")

    assert as_article_ref("bare-1") == ByIdentity("bare-1")
    assert as_article_ref(article) == Full(article)
    assert as_article_ref("bare-1").identity == "bare-1"
    assert as_article_ref({"id": "full-2", "content": "Text"}).identity == "full-2"
    assert as_article_ref(article).payload is article


def test_new_article_without_id_is_malformed():
    outcome = validate_identities(["a1", {"content": "no id"}], [_present("a2")])

    assert isinstance(outcome.error, MalformedInputError)
    assert outcome.error.index == 1
    assert outcome.error.collection == "new_articles"
