from sortcheckstyle.normalize.module_groups import (
    CHECKER_GROUP,
    GROUP_LABELS,
    MODULE_GROUPS,
    SUPPRESSION_GROUP,
    TREE_WALKER_GROUP,
    UNKNOWN_GROUP,
    _GROUPS,
    is_in_suppression_group,
    module_group,
)


def test_checker_first_and_tree_walker_last():
    assert module_group("Checker") == CHECKER_GROUP
    assert module_group("TreeWalker") == TREE_WALKER_GROUP
    assert all(CHECKER_GROUP <= group <= TREE_WALKER_GROUP for group in MODULE_GROUPS.values())


def test_unknown_and_missing_names():
    assert module_group("MyCompanyCheck") == UNKNOWN_GROUP
    assert module_group(None) == UNKNOWN_GROUP
    assert module_group("linelength") == UNKNOWN_GROUP
    assert UNKNOWN_GROUP < TREE_WALKER_GROUP
    assert GROUP_LABELS[UNKNOWN_GROUP] == "unknown"


def test_known_groups():
    assert module_group("JavadocMethod") < module_group("ConstantName")
    assert module_group("LineLength") < module_group("FileTabCharacter")
    assert module_group("FileTabCharacter") < SUPPRESSION_GROUP


def test_suppression_group():
    assert is_in_suppression_group("SuppressionXpathSingleFilter")
    assert is_in_suppression_group("SuppressWithNearbyCommentFilter")
    assert not is_in_suppression_group("SuppressWarningsHolder")
    assert not is_in_suppression_group("LineLength")
    assert not is_in_suppression_group(None)


def test_each_module_is_in_exactly_one_group():
    listed = [name for _, _, names in _GROUPS for name in names]
    assert len(listed) == len(set(listed)) == len(MODULE_GROUPS)
