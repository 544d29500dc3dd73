import pytest
from rest_framework import serializers

from creditor_reference.api.serializers import CreditorReferenceSerializerField


class PaymentSerializer(serializers.Serializer):
    reference = CreditorReferenceSerializerField()


class InvoiceSerializer(serializers.Serializer):
    reference = CreditorReferenceSerializerField(generate=True)


def test_parses_printable_reference(printable_reference, electronic_reference):
    serializer = PaymentSerializer(data={"reference": printable_reference})
    assert serializer.is_valid(), serializer.errors
    assert serializer.validated_data["reference"] == electronic_reference


def test_parses_to_printable_storage(printable_storage, electronic_reference):
    serializer = PaymentSerializer(data={"reference": electronic_reference})
    assert serializer.is_valid(), serializer.errors
    assert serializer.validated_data["reference"] == "RF18 5390 0754 7034"


@pytest.mark.parametrize(
    "reference, message",
    [
        ("18539007547034", "Invalid creditor reference: identifier is not RF"),
        (
            "RF19539007547034",
            "Invalid creditor reference: checksum has invalid format",
        ),
        (
            "RF18539007547034@",
            "Invalid creditor reference: invalid character not parseable",
        ),
        (
            "RF18539007547034928TOOLONG",
            "Invalid creditor reference: invalid format not parseable",
        ),
    ],
)
def test_rejects_invalid_reference(reference, message):
    serializer = PaymentSerializer(data={"reference": reference})
    assert not serializer.is_valid()
    assert serializer.errors["reference"] == [message]
    assert serializer.errors["reference"][0].code == "invalid"


def test_blank_reference_is_rejected():
    serializer = PaymentSerializer(data={"reference": ""})
    assert not serializer.is_valid()
    assert serializer.errors["reference"][0].code == "blank"


def test_generates_reference_from_body(electronic_reference):
    serializer = InvoiceSerializer(data={"reference": "5390 0754 7034"})
    assert serializer.is_valid(), serializer.errors
    assert serializer.validated_data["reference"] == electronic_reference


def test_generate_rejects_invalid_body():
    serializer = InvoiceSerializer(data={"reference": "5390@"})
    assert not serializer.is_valid()
    assert serializer.errors["reference"] == [
        "Invalid creditor reference: invalid character not parseable"
    ]


def test_representation(printable_storage, electronic_reference, printable_reference):
    assert PaymentSerializer({"reference": electronic_reference}).data == {
        "reference": printable_reference
    }


def test_representation_of_invalid_stored_value():
    assert PaymentSerializer({"reference": "legacy-42"}).data == {
        "reference": "legacy-42"
    }
