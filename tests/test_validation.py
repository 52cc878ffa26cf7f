import pytest

from s5kit.validation import (
    ValidationError,
    check_number_of_arguments,
    check_versioning_flag_compatibility,
    check_versioning_url_remote,
)


def test_versioning_on_local_object_rejected():
    with pytest.raises(ValidationError, match="can only be used with remote objects"):
        check_versioning_url_remote(is_remote=False, is_versioned=True)


@pytest.mark.parametrize(
    "is_remote, is_versioned", [(True, True), (True, False), (False, False)]
)
def test_versioning_url_remote_accepted(is_remote, is_versioned):
    assert check_versioning_url_remote(is_remote, is_versioned) is None


def test_versioning_message_names_flags():
    with pytest.raises(ValidationError) as excinfo:
        check_versioning_url_remote(False, True)
    assert '"all-versions"' in str(excinfo.value)
    assert '"version-id"' in str(excinfo.value)


def test_combining_version_flags_rejected():
    with pytest.raises(ValidationError, match="it is not allowed to combine"):
        check_versioning_flag_compatibility(True, "v1")


@pytest.mark.parametrize("all_versions, version_id", [(True, ""), (False, "v1"), (False, "")])
def test_version_flags_compatible(all_versions, version_id):
    assert check_versioning_flag_compatibility(all_versions, version_id) is None


@pytest.mark.parametrize("args", [[], ["a", "b"]])
def test_exactly_one_argument(args):
    with pytest.raises(ValidationError, match="expected only one argument"):
        check_number_of_arguments(args, 1, 1)


@pytest.mark.parametrize("args", [["a"], ["a", "b", "c"]])
def test_exactly_two_arguments(args):
    with pytest.raises(
        ValidationError, match="expected source and destination arguments"
    ):
        check_number_of_arguments(args, 2, 2)


def test_too_few_arguments():
    with pytest.raises(ValidationError, match="expected at least") as excinfo:
        check_number_of_arguments(["only"], 2, -1)
    assert '"only"' in str(excinfo.value)


def test_too_many_arguments():
    with pytest.raises(ValidationError, match="expected at most"):
        check_number_of_arguments(["a", "b", "c", "d"], 1, 3)


def test_negative_maximum_is_unbounded():
    args = [str(i) for i in range(50)]
    assert check_number_of_arguments(args, 1, -1) is None


def test_within_range_accepted():
    assert check_number_of_arguments(["a", "b"], 1, 3) is None