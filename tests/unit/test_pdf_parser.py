"""Unit tests for PDF form reader module."""

import io

import pytest
import pytest_check as check
from pypdf import PdfReader

from src.models.schemas import FieldKind
from src.parsing.pdf_parser import MAX_FILE_SIZE, PDFParseError, parse_form_fields
from tests.pdf_factory import (
    FLAG_RADIO,
    FieldSpec,
    build_form_pdf,
    build_plain_pdf,
    checkbox,
    dropdown,
    listbox,
    pushbutton,
    radio,
    signature,
    text,
)


class TestParseFormFieldsValid:
    """Tests for successful form reading."""

    def test_reads_text_field(self) -> None:
        """Text field is read with its name, kind and value."""
        fields = parse_form_fields(build_form_pdf(text("FirstName", "Ada")))

        check.equal(len(fields), 1)
        check.equal(fields[0].name, "FirstName")
        check.equal(fields[0].kind, FieldKind.TEXT)
        check.equal(fields[0].value, "Ada")

    def test_classifies_every_kind(self) -> None:
        """Field type and flags map onto the expected kinds."""
        pdf = build_form_pdf(
            text("t"),
            checkbox("c", checked=True),
            radio("r", "A"),
            pushbutton("p"),
            dropdown("d", "X"),
            listbox("l", ["Y"]),
            signature("s"),
        )
        kinds = {f.name: f.kind for f in parse_form_fields(pdf)}

        check.equal(
            kinds,
            {
                "t": FieldKind.TEXT,
                "c": FieldKind.CHECKBOX,
                "r": FieldKind.RADIO_GROUP,
                "p": FieldKind.OTHER,
                "d": FieldKind.DROPDOWN,
                "l": FieldKind.MULTI_SELECT,
                "s": FieldKind.OTHER,
            },
        )

    def test_preserves_document_order(self) -> None:
        """Fields are listed in the order of the AcroForm field array."""
        pdf = build_form_pdf(text("zeta"), text("alpha"), text("mid"))

        check.equal([f.name for f in parse_form_fields(pdf)], ["zeta", "alpha", "mid"])

    def test_raw_values_are_plain_python(self) -> None:
        """Names, strings and arrays come back as str and list[str]."""
        pdf = build_form_pdf(
            checkbox("c", checked=False),
            radio("r", "Blue"),
            listbox("l", ["Ham", "Olives"]),
        )
        values = {f.name: f.value for f in parse_form_fields(pdf)}

        check.equal(values["c"], "/Off")
        check.equal(values["r"], "/Blue")
        check.equal(values["l"], ["Ham", "Olives"])
        check.is_instance(values["l"], list)

    def test_missing_values_are_none(self) -> None:
        """Fields without /V have no value."""
        pdf = build_form_pdf(text("t"), radio("r"))

        check.equal([f.value for f in parse_form_fields(pdf)], [None, None])

    def test_nested_fields_get_qualified_names(self) -> None:
        """Children inherit the parent's name prefix and field type."""
        parent = FieldSpec(
            "person",
            field_type="/Tx",
            kids=[FieldSpec("first", value="Ada"), FieldSpec("last", value="Lovelace")],
        )
        fields = parse_form_fields(build_form_pdf(parent, checkbox("Agree", True)))

        check.equal([f.name for f in fields], ["person.first", "person.last", "Agree"])
        check.equal([f.kind for f in fields[:2]], [FieldKind.TEXT, FieldKind.TEXT])
        check.equal([f.value for f in fields[:2]], ["Ada", "Lovelace"])

    def test_empty_form_returns_no_fields(self) -> None:
        """An AcroForm with an empty field array yields an empty list."""
        check.equal(parse_form_fields(build_form_pdf()), [])

    def test_duplicate_names_are_all_listed(self) -> None:
        """Two fields with the same name are both returned."""
        pdf = build_form_pdf(text("Name", "a"), text("Name", "b"))

        check.equal([f.value for f in parse_form_fields(pdf)], ["a", "b"])

    def test_duplicate_names_survive_where_get_fields_folds_them(self) -> None:
        """pypdf's name-keyed field map keeps one entry; the reader keeps both."""
        pdf = build_form_pdf(text("Name", "a"), text("Name", "b"))

        check.equal(len(PdfReader(io.BytesIO(pdf)).get_fields()), 1)
        check.equal(len(parse_form_fields(pdf)), 2)

    def test_reads_radio_options(self) -> None:
        """Radio export values from /Opt are carried with the field."""
        pdf = build_form_pdf(radio("Color", "1", options=["Red", "Blue"]))
        field = parse_form_fields(pdf)[0]

        check.equal(field.value, "/1")
        check.equal(field.options, ["Red", "Blue"])

    def test_options_inherited_from_parent(self) -> None:
        """A child field without /Opt uses its parent's options."""
        parent = FieldSpec(
            "group",
            field_type="/Btn",
            flags=FLAG_RADIO,
            options=["Yes", "No"],
            kids=[FieldSpec("choice", value="/0", value_is_name=True)],
        )
        field = parse_form_fields(build_form_pdf(parent))[0]

        check.equal(field.name, "group.choice")
        check.equal(field.kind, FieldKind.RADIO_GROUP)
        check.equal(field.options, ["Yes", "No"])

    def test_fields_without_opt_have_no_options(self) -> None:
        """Fields that declare no /Opt report None."""
        check.is_none(parse_form_fields(build_form_pdf(radio("r", "A")))[0].options)


class TestParseFormFieldsRejection:
    """Tests for PDF validation and rejection."""

    def test_rejects_empty_bytes(self) -> None:
        """Empty bytes raises PDFParseError."""
        with pytest.raises(PDFParseError, match="Empty file"):
            parse_form_fields(b"")

    def test_rejects_non_pdf_file(self) -> None:
        """Non-PDF content raises PDFParseError."""
        with pytest.raises(PDFParseError, match="Invalid PDF"):
            parse_form_fields(b"This is a plain text file, not a PDF.")

    def test_rejects_oversized_file(self) -> None:
        """File over 10MB raises PDFParseError."""
        oversized = b"%PDF-1.4" + b"\x00" * (MAX_FILE_SIZE + 1)

        with pytest.raises(PDFParseError, match="exceeds maximum"):
            parse_form_fields(oversized)

    def test_respects_custom_size_limit(self) -> None:
        """The size cap can be lowered per call."""
        pdf = build_form_pdf(text("a"))

        with pytest.raises(PDFParseError, match="exceeds maximum"):
            parse_form_fields(pdf, max_file_size=len(pdf) - 1)

    def test_rejects_truncated_pdf(self) -> None:
        """Truncated PDF raises PDFParseError."""
        with pytest.raises(PDFParseError, match="Corrupt|Failed"):
            parse_form_fields(b"%PDF-1.4\n1 0 obj\n<<")

    def test_rejects_encrypted_pdf(self) -> None:
        """Encrypted PDF raises PDFParseError."""
        pdf = build_form_pdf(text("a", "secret"), password="hunter2")

        with pytest.raises(PDFParseError, match="Encrypted"):
            parse_form_fields(pdf)

    def test_rejects_pdf_without_form(self) -> None:
        """PDF without an AcroForm raises PDFParseError."""
        with pytest.raises(PDFParseError, match="no interactive form"):
            parse_form_fields(build_plain_pdf())
