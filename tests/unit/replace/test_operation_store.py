import pytest
from pydantic import ValidationError

from snippet_kit.replace.models import ReplaceOperation, ReplaceStep
from snippet_kit.replace.store import OperationStore, dump_operations, load_operations


class ListPersistence:
    def __init__(self, operations: list[ReplaceOperation] | None = None) -> None:
        self.operations = list(operations or [])
        self.writes = 0

    def get(self) -> list[ReplaceOperation]:
        return list(self.operations)

    def set(self, operations: list[ReplaceOperation]) -> None:
        self.operations = list(operations)
        self.writes += 1


@pytest.fixture
def trim_op() -> ReplaceOperation:
    return ReplaceOperation(
        name="trim", steps=[ReplaceStep(find=r"[ \t]+$", replace="")]
    )


@pytest.fixture
def persistence(trim_op: ReplaceOperation) -> ListPersistence:
    return ListPersistence([trim_op])


@pytest.fixture
def store(persistence: ListPersistence) -> OperationStore:
    return OperationStore(persistence)


class TestOperationStore:
    def test_loads_from_persistence(
        self, store: OperationStore, trim_op: ReplaceOperation
    ) -> None:
        assert store.list() == ["trim"]
        assert store.get("trim") == trim_op

    def test_get_unknown_raises(self, store: OperationStore) -> None:
        with pytest.raises(KeyError, match="Operation 'nope' not found"):
            store.get("nope")

    def test_save_writes_through(
        self, store: OperationStore, persistence: ListPersistence
    ) -> None:
        store.save(ReplaceOperation(name="tabs", steps=[]))

        assert store.list() == ["trim", "tabs"]
        assert [op.name for op in persistence.operations] == ["trim", "tabs"]

    def test_save_replaces_same_name(
        self, store: OperationStore, persistence: ListPersistence
    ) -> None:
        store.save(ReplaceOperation(name="trim", steps=[]))

        assert store.get("trim").steps == []
        assert len(persistence.operations) == 1

    def test_remove(self, store: OperationStore, persistence: ListPersistence) -> None:
        store.remove("trim")

        assert store.list() == []
        assert persistence.operations == []

    def test_remove_unknown_raises(self, store: OperationStore) -> None:
        with pytest.raises(KeyError, match="not found"):
            store.remove("nope")

    def test_add_step_appends(self, store: OperationStore) -> None:
        updated = store.add_step("trim", ReplaceStep(find="a", replace="b"))

        assert [s.find for s in updated.steps] == [r"[ \t]+$", "a"]
        assert store.get("trim") == updated

    def test_remove_step(self, store: OperationStore) -> None:
        updated = store.remove_step("trim", 0)

        assert updated.steps == []

    def test_remove_missing_step_raises(
        self, store: OperationStore, persistence: ListPersistence
    ) -> None:
        with pytest.raises(IndexError, match="has no step 2"):
            store.remove_step("trim", 1)

        assert persistence.writes == 0


class TestOperationModels:
    def test_extra_fields_are_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            ReplaceStep(find="a", replace="b", flags="g")  # type: ignore[call-arg]

    def test_name_is_required(self) -> None:
        with pytest.raises(ValidationError):
            ReplaceOperation(name="", steps=[])

    def test_replace_defaults_to_empty(self) -> None:
        assert ReplaceStep(find="x").replace == ""


class TestYaml:
    def test_dump_and_load(self, trim_op: ReplaceOperation) -> None:
        ops = [trim_op, ReplaceOperation(name="ümlaut", steps=[])]

        text = dump_operations(ops)

        assert "ümlaut" in text
        assert load_operations(text) == ops

    def test_load_empty_text(self) -> None:
        assert load_operations("") == []

    def test_load_rejects_mapping(self) -> None:
        with pytest.raises(ValueError, match="Expected a list of operations"):
            load_operations("name: trim\n")

    def test_load_validates_items(self) -> None:
        with pytest.raises(ValidationError):
            load_operations("- name: x\n  steps:\n    - replace: y\n")
