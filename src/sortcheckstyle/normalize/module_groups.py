"""Grouping of Checkstyle module names, used by the checkstyle ordering profile.

Groups follow the sections of the Checkstyle check catalogue. ``Checker``
always comes first and ``TreeWalker`` last among its siblings; module names
that are not listed here sort after every known group but before
``TreeWalker``.
"""
from typing import Dict, Optional, Tuple

CHECKER_GROUP = 0
SUPPRESSION_GROUP = 15
FILE_FILTER_GROUP = 16
UNKNOWN_GROUP = 50
TREE_WALKER_GROUP = 99

_GROUPS: Tuple[Tuple[int, str, Tuple[str, ...]], ...] = (
    (CHECKER_GROUP, "root", ("Checker",)),
    (1, "annotations", (
        "AnnotationLocation", "AnnotationOnSameLine", "AnnotationUseStyle",
        "MissingDeprecated", "MissingOverride", "PackageAnnotation",
        "SuppressWarnings", "SuppressWarningsHolder",
    )),
    (2, "block checks", (
        "AvoidNestedBlocks", "EmptyBlock", "EmptyCatchBlock", "LeftCurly",
        "NeedBraces", "RightCurly",
    )),
    (3, "class design", (
        "DesignForExtension", "FinalClass", "HideUtilityClassConstructor",
        "InnerTypeLast", "InterfaceIsType", "MutableException",
        "OneTopLevelClass", "SealedShouldHavePermitsList", "ThrowsCount",
        "VisibilityModifier",
    )),
    (4, "coding", (
        "ArrayTrailingComma", "AvoidDoubleBraceInitialization",
        "AvoidInlineConditionals", "AvoidNoArgumentSuperConstructorCall",
        "ConstructorsDeclarationGrouping", "CovariantEquals",
        "DeclarationOrder", "DefaultComesLast", "EmptyStatement",
        "EqualsAvoidNull", "EqualsHashCode", "ExplicitInitialization",
        "FallThrough", "FinalLocalVariable", "HiddenField", "IllegalCatch",
        "IllegalInstantiation", "IllegalThrows", "IllegalToken",
        "IllegalTokenText", "IllegalType", "InnerAssignment", "MagicNumber",
        "MatchXpath", "MissingCtor", "MissingNullCaseInSwitch",
        "MissingSwitchDefault", "ModifiedControlVariable",
        "MultipleStringLiterals", "MultipleVariableDeclarations",
        "NestedForDepth", "NestedIfDepth", "NestedTryDepth",
        "NoArrayTrailingComma", "NoFinalizer", "OneStatementPerLine",
        "OverloadMethodsDeclarationOrder", "PackageDeclaration",
        "ParameterAssignment", "PatternVariableAssignment", "RequireThis",
        "ReturnCount", "SimplifyBooleanExpression", "SimplifyBooleanReturn",
        "StringLiteralEquality", "SuperClone", "SuperFinalize",
        "UnnecessaryNullCheckWithInstanceOf", "UnnecessaryParentheses",
        "UnnecessarySemicolonAfterOuterTypeDeclaration",
        "UnnecessarySemicolonAfterTypeMemberDeclaration",
        "UnnecessarySemicolonInEnumeration",
        "UnnecessarySemicolonInTryWithResources",
        "UnusedCatchParameterShouldBeUnnamed",
        "UnusedLambdaParameterShouldBeUnnamed", "UnusedLocalVariable",
        "VariableDeclarationUsageDistance", "WhenShouldBeUsed",
    )),
    (5, "headers", ("Header", "MultiFileRegexpHeader", "RegexpHeader")),
    (6, "imports", (
        "AvoidStarImport", "AvoidStaticImport", "CustomImportOrder",
        "IllegalImport", "ImportControl", "ImportOrder", "RedundantImport",
        "UnusedImports",
    )),
    (7, "javadoc comments", (
        "AtclauseOrder", "InvalidJavadocPosition", "JavadocBlockTagLocation",
        "JavadocContentLocation", "JavadocLeadingAsteriskAlign",
        "JavadocMethod", "JavadocMissingLeadingAsterisk",
        "JavadocMissingWhitespaceAfterAsterisk", "JavadocPackage",
        "JavadocParagraph", "JavadocStyle",
        "JavadocTagContinuationIndentation", "JavadocType", "JavadocVariable",
        "MissingJavadocMethod", "MissingJavadocPackage", "MissingJavadocType",
        "NonEmptyAtclauseDescription", "RequireEmptyLineBeforeBlockTagGroup",
        "SingleLineJavadoc", "SummaryJavadoc", "WriteTag",
    )),
    (8, "metrics", (
        "BooleanExpressionComplexity", "ClassDataAbstractionCoupling",
        "ClassFanOutComplexity", "CyclomaticComplexity", "JavaNCSS",
        "NPathComplexity",
    )),
    (9, "miscellaneous", (
        "ArrayTypeStyle", "AvoidEscapedUnicodeCharacters",
        "CommentsIndentation", "DescendantToken", "FinalParameters",
        "Indentation", "NewlineAtEndOfFile", "NoCodeInFile",
        "OrderedProperties", "OuterTypeFilename", "TodoComment",
        "TrailingComment", "Translation", "UncommentedMain",
        "UniqueProperties", "UpperEll",
    )),
    (10, "modifiers", (
        "ClassMemberImpliedModifier", "InterfaceMemberImpliedModifier",
        "ModifierOrder", "RedundantModifier",
    )),
    (11, "naming conventions", (
        "AbbreviationAsWordInName", "AbstractClassName", "CatchParameterName",
        "ClassTypeParameterName", "ConstantName", "IllegalIdentifierName",
        "InterfaceTypeParameterName", "LambdaParameterName",
        "LocalFinalVariableName", "LocalVariableName", "MemberName",
        "MethodName", "MethodTypeParameterName", "PackageName",
        "ParameterName", "PatternVariableName", "RecordComponentName",
        "RecordTypeParameterName", "StaticVariableName", "TypeName",
    )),
    (12, "regexp checks", (
        "Regexp", "RegexpMultiline", "RegexpOnFilename", "RegexpSingleline",
        "RegexpSinglelineJava",
    )),
    (13, "size violations", (
        "AnonInnerLength", "ExecutableStatementCount", "FileLength",
        "LambdaBodyLength", "LineLength", "MethodCount", "MethodLength",
        "OuterTypeNumber", "ParameterNumber", "RecordComponentNumber",
    )),
    (14, "whitespace", (
        "EmptyForInitializerPad", "EmptyForIteratorPad", "EmptyLineSeparator",
        "FileTabCharacter", "GenericWhitespace", "MethodParamPad",
        "NoLineWrap", "NoWhitespaceAfter", "NoWhitespaceBefore",
        "NoWhitespaceBeforeCaseDefaultColon", "OperatorWrap", "ParenPad",
        "SeparatorWrap", "SingleSpaceSeparator", "TypecastParenPad",
        "WhitespaceAfter", "WhitespaceAround",
    )),
    (SUPPRESSION_GROUP, "non-file filters", (
        "SeverityMatchFilter", "SuppressWarningsFilter",
        "SuppressWithNearbyCommentFilter", "SuppressWithNearbyTextFilter",
        "SuppressWithPlainTextCommentFilter", "SuppressionCommentFilter",
        "SuppressionFilter", "SuppressionSingleFilter",
        "SuppressionXpathFilter", "SuppressionXpathSingleFilter",
    )),
    (FILE_FILTER_GROUP, "file filters", ("BeforeExecutionExclusionFileFilter",)),
    (TREE_WALKER_GROUP, "tree walker", ("TreeWalker",)),
)

MODULE_GROUPS: Dict[str, int] = {
    module_name: index
    for index, _, module_names in _GROUPS
    for module_name in module_names
}

GROUP_LABELS: Dict[int, str] = {index: label for index, label, _ in _GROUPS}
GROUP_LABELS[UNKNOWN_GROUP] = "unknown"


def module_group(module_name: Optional[str]) -> int:
    """Return the group index of a Checkstyle module; unknown or missing names get UNKNOWN_GROUP."""
    if module_name is None:
        return UNKNOWN_GROUP
    return MODULE_GROUPS.get(module_name, UNKNOWN_GROUP)


def is_in_suppression_group(module_name: Optional[str]) -> bool:
    return module_group(module_name) == SUPPRESSION_GROUP
