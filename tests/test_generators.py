"""Tests for field and sheet generation."""

import pytest

from graphql_workbook.engine.diagnostics import DiagnosticCode, Diagnostics, DiagnosticSeverity
from graphql_workbook.generators import (
    IntegrityMode,
    SheetBuilder,
    check_integrity,
    generate_field,
    generate_sheet,
    generate_sheets,
    scalar_field_type,
)
from graphql_workbook.introspection.types import (
    ListRef,
    NonNullRef,
    ObjectRef,
    OtherRef,
    ScalarRef,
    SourceField,
    SourceObject,
)
from graphql_workbook.workbook.base import (
    ConstraintType,
    FieldType,
    PartialSheetConfig,
    Relationship,
)


def field(name, type_ref, description=""):
    return SourceField(name=name, type=type_ref, description=description)


def obj(name, *fields, description=""):
    return SourceObject(name=name, description=description, fields=tuple(fields))


@pytest.fixture
def movie():
    return obj(
        "Movie",
        field("id", NonNullRef(ScalarRef("ID"))),
        field("title", NonNullRef(ScalarRef("String"))),
        field("director", ObjectRef("Person")),
        description="A feature film",
    )


@pytest.fixture
def person():
    return obj(
        "Person",
        field("id", NonNullRef(ScalarRef("ID"))),
        field("name", ScalarRef("String")),
    )


# =============================================================================
# Field Generation Tests
# =============================================================================

class TestScalarMapping:
    """Tests for scalar type mapping."""

    @pytest.mark.parametrize("scalar,expected", [
        ("Int", FieldType.NUMBER),
        ("Float", FieldType.NUMBER),
        ("Boolean", FieldType.BOOLEAN),
        ("String", FieldType.STRING),
        ("ID", FieldType.STRING),
        ("DateTime", FieldType.STRING),
        ("JSON", FieldType.STRING),
    ])
    def test_scalar_field_type(self, scalar, expected):
        assert scalar_field_type(scalar) == expected

    def test_scalar_field(self):
        result = generate_field(field("releaseYear", ScalarRef("Int"), "Year of release"), "Movie")

        assert result.key == "releaseYear"
        assert result.label == "Release Year"
        assert result.description == "Year of release"
        assert result.type == FieldType.NUMBER
        assert result.constraints == []
        assert result.multi is False
        assert result.config is None


class TestGenerateField:
    """Tests for generate_field."""

    def test_non_null_adds_required(self):
        result = generate_field(field("title", NonNullRef(ScalarRef("String"))), "Movie")

        assert result.type == FieldType.STRING
        assert result.is_required
        assert [c.type for c in result.constraints] == [ConstraintType.REQUIRED]

    def test_object_is_reference(self):
        result = generate_field(field("director", ObjectRef("Person")), "Movie")

        assert result.type == FieldType.REFERENCE
        assert result.config.ref == "Person"
        assert result.config.key == "id"
        assert result.config.relationship == Relationship.HAS_ONE
        assert not result.is_required

    def test_non_null_object_is_required_reference(self):
        result = generate_field(field("director", NonNullRef(ObjectRef("Person"))), "Movie")

        assert result.type == FieldType.REFERENCE
        assert result.config.ref == "Person"
        assert result.is_required

    def test_list_is_multi_string(self):
        result = generate_field(field("ratings", ListRef(ScalarRef("Int"))), "Movie")

        assert result.type == FieldType.STRING
        assert result.multi is True
        assert result.config is None

    def test_list_of_objects_is_multi_string(self):
        result = generate_field(field("cast", NonNullRef(ListRef(ObjectRef("Person")))), "Movie")

        assert result.type == FieldType.STRING
        assert result.multi is True
        assert result.is_required

    @pytest.mark.parametrize("kind", ["UNION", "INTERFACE", "ENUM", "INPUT_OBJECT"])
    def test_unsupported_kind_is_skipped(self, kind):
        diagnostics = Diagnostics()

        result = generate_field(field("thing", OtherRef(kind=kind, name="Thing")), "Movie", diagnostics)

        assert result is None
        assert len(diagnostics) == 1
        diagnostic = diagnostics.items[0]
        assert diagnostic.severity == DiagnosticSeverity.WARNING
        assert diagnostic.code == DiagnosticCode.UNSUPPORTED_FIELD_KIND
        assert diagnostic.path == "Movie.thing"
        assert "thing" in diagnostic.message
        assert "Movie" in diagnostic.message
        assert kind in diagnostic.message
        assert diagnostic.context == {"kind": kind}

    def test_unsupported_kind_is_logged(self, caplog):
        with caplog.at_level("WARNING"):
            generate_field(field("result", OtherRef(kind="UNION", name="Search")), "Movie")

        assert "skipped" in caplog.text

    def test_non_null_unsupported_is_skipped(self):
        result = generate_field(field("genre", NonNullRef(OtherRef(kind="ENUM", name="Genre"))), "Movie")

        assert result is None

    @pytest.mark.parametrize("name,label", [
        ("firstName", "First Name"),
        ("birth_date", "Birth Date"),
        ("release-year", "Release Year"),
        ("userID", "User Id"),
        ("id", "Id"),
    ])
    def test_label(self, name, label):
        assert generate_field(field(name, ScalarRef("String")), "Movie").label == label


# =============================================================================
# Sheet Generation Tests
# =============================================================================

class TestGenerateSheet:
    """Tests for generate_sheet."""

    def test_basic_sheet(self, movie):
        sheet = generate_sheet(movie)

        assert sheet.name == "Movie"
        assert sheet.slug == "Movie"
        assert sheet.description == "A feature film"
        assert [f.key for f in sheet.fields] == ["id", "title", "director"]

    def test_existing_id_is_kept(self, movie):
        sheet = generate_sheet(movie)

        id_fields = [f for f in sheet.fields if f.key == "id"]
        assert len(id_fields) == 1
        assert id_fields[0].type == FieldType.STRING
        assert id_fields[0].is_required

    def test_id_field_prepended(self):
        diagnostics = Diagnostics()
        studio = obj("Studio", field("name", ScalarRef("String")), field("founded", ScalarRef("Int")))

        sheet = generate_sheet(studio, diagnostics=diagnostics)

        assert [f.key for f in sheet.fields] == ["id", "name", "founded"]
        id_field = sheet.fields[0]
        assert id_field.label == "Id"
        assert id_field.type == FieldType.NUMBER
        assert diagnostics.by_code(DiagnosticCode.ID_FIELD_ADDED)

    def test_sheet_with_only_unsupported_fields(self):
        diagnostics = Diagnostics()
        search = obj("Holder", field("result", OtherRef(kind="UNION", name="Search")))

        sheet = generate_sheet(search, diagnostics=diagnostics)

        assert [f.key for f in sheet.fields] == ["id"]
        assert sheet.fields[0].type == FieldType.NUMBER
        assert diagnostics.by_code(DiagnosticCode.UNSUPPORTED_FIELD_KIND)

    def test_union_field_omitted(self, person):
        person_with_union = obj(
            "Person",
            *person.fields,
            field("favorite", OtherRef(kind="UNION", name="SearchResult")),
        )

        sheet = generate_sheet(person_with_union)

        assert sheet.get_field("favorite") is None
        assert [f.key for f in sheet.fields] == ["id", "name"]

    def test_name_is_capitalized(self):
        sheet = generate_sheet(obj("movieReview", field("id", ScalarRef("Int"))))

        assert sheet.name == "Movie Review"
        assert sheet.slug == "movieReview"

    def test_override_extras_are_applied(self, movie):
        actions = [{"operation": "submitAction", "label": "Submit"}]
        overrides = [
            {"slug": "Person", "readonly": True},
            {"slug": "Movie", "actions": actions},
            {"slug": "Movie", "actions": []},
        ]

        sheet = generate_sheet(movie, overrides)

        assert sheet.actions == actions
        assert not hasattr(sheet, "readonly")

    def test_override_cannot_change_computed_keys(self, movie):
        override = PartialSheetConfig(
            slug="Movie",
            name="Films",
            description="overridden",
            fields=[{"key": "x", "label": "X", "type": "string"}],
        )

        sheet = generate_sheet(movie, [override])

        assert sheet.name == "Movie"
        assert sheet.slug == "Movie"
        assert sheet.description == "A feature film"
        assert [f.key for f in sheet.fields] == ["id", "title", "director"]


class TestSheetBuilder:
    """Tests for SheetBuilder."""

    def test_ensure_id_field_only_once(self):
        builder = SheetBuilder("Thing")

        assert builder.ensure_id_field() is True
        assert builder.ensure_id_field() is False
        assert [f.key for f in builder.build().fields] == ["id"]


# =============================================================================
# Integrity Tests
# =============================================================================

class TestIntegrity:
    """Tests for the reference integrity pass."""

    def test_valid_references_kept(self, movie, person):
        sheets = generate_sheets([movie, person])

        assert [s.slug for s in sheets] == ["Movie", "Person"]
        director = sheets[0].get_field("director")
        assert director.type == FieldType.REFERENCE
        assert director.config.ref == "Person"

    def test_unknown_reference_drops_sheet(self, person):
        movie = obj(
            "Movie",
            field("id", NonNullRef(ScalarRef("ID"))),
            field("reviewer", ObjectRef("Critic")),
        )
        diagnostics = Diagnostics()

        sheets = generate_sheets([movie, person], diagnostics=diagnostics)

        assert [s.slug for s in sheets] == ["Person"]
        dropped = diagnostics.by_code(DiagnosticCode.DANGLING_REFERENCE)
        assert len(dropped) == 1
        assert dropped[0].path == "Movie"
        assert dropped[0].context["missing"] == ["Critic"]

    def test_universe_mode_does_not_revalidate(self, person):
        """A sheet referencing a dropped sheet survives in universe mode."""
        review = obj("Review", field("movie", ObjectRef("Movie")))
        movie = obj("Movie", field("reviewer", ObjectRef("Critic")))

        sheets = generate_sheets([review, movie, person])

        assert [s.slug for s in sheets] == ["Review", "Person"]

    def test_survivors_mode_cascades(self, person):
        review = obj("Review", field("movie", ObjectRef("Movie")))
        movie = obj("Movie", field("reviewer", ObjectRef("Critic")))
        diagnostics = Diagnostics()

        sheets = generate_sheets(
            [review, movie, person],
            diagnostics=diagnostics,
            integrity=IntegrityMode.SURVIVORS,
        )

        assert [s.slug for s in sheets] == ["Person"]
        assert [d.path for d in diagnostics.by_code(DiagnosticCode.DANGLING_REFERENCE)] == ["Movie", "Review"]

    def test_self_reference_kept(self):
        person = obj("Person", field("manager", ObjectRef("Person")))

        assert [s.slug for s in generate_sheets([person], integrity=IntegrityMode.SURVIVORS)] == ["Person"]

    def test_check_integrity_preserves_order(self, movie, person):
        sheets = [generate_sheet(person), generate_sheet(movie)]

        kept = check_integrity(sheets, ["Movie", "Person"])

        assert [s.slug for s in kept] == ["Person", "Movie"]

    def test_every_sheet_has_one_id(self, movie, person):
        studio = obj("Studio", field("name", ScalarRef("String")))

        for sheet in generate_sheets([movie, person, studio]):
            assert len([f for f in sheet.fields if f.key == "id"]) == 1

    def test_generation_is_idempotent(self, movie, person):
        overrides = [{"slug": "Movie", "actions": [{"operation": "submit"}]}]

        first = [s.to_dict() for s in generate_sheets([movie, person], overrides)]
        second = [s.to_dict() for s in generate_sheets([movie, person], overrides)]

        assert first == second
