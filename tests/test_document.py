import pytest

from onetemplate.document import DynamicTemplate
from onetemplate.errors import MultipleMatchesError, NotFoundError, TypeMismatchError
from onetemplate.nodes import Pair, Vector


@pytest.fixture
def template() -> DynamicTemplate:
    template = DynamicTemplate()
    template.add_pair("name", "web-0")
    disk = template.add_vector("disk")
    disk.add_pair("IMAGE_ID", 119)
    disk.add_pair("TARGET", "vda")
    template.add_pair("MEMORY", 512)
    nic = template.add_vector("NIC")
    nic.add_pair("NETWORK", "private")
    return template


def test_serialize_one_element_per_line_without_trailing_newline(template):
    assert template.serialize() == (
        'NAME="web-0"\n'
        'DISK=[\n    IMAGE_ID="119",\n    TARGET="vda" ]\n'
        'MEMORY="512"\n'
        'NIC=[\n    NETWORK="private" ]'
    )


def test_serialize_is_idempotent(template):
    assert template.serialize() == template.serialize()
    assert str(template) == template.serialize()


def test_empty_template_serializes_to_empty_string():
    assert DynamicTemplate().serialize() == ""


def test_round_trip_through_xml(template):
    parsed = DynamicTemplate.parse_element(template.to_xml())
    assert parsed.elements == template.elements


def test_round_trip_through_pretty_xml(template):
    parsed = DynamicTemplate.parse_element(template.to_xml(pretty_print=True))
    assert parsed.serialize() == template.serialize()


def test_get_pair_distinguishes_missing_and_ambiguous():
    template = DynamicTemplate()
    template.add_pair("A", "1")
    template.add_pair("A", "2")

    with pytest.raises(MultipleMatchesError):
        template.get_pair("A")
    assert [pair.value for pair in template.get_pairs("A")] == ["1", "2"]
    with pytest.raises(NotFoundError):
        template.get_pair("B")


def test_pairs_and_vectors_are_looked_up_separately(template):
    assert template.get_pairs("DISK") == []
    assert template.get_vectors("NAME") == []
    assert template.get_vector("DISK").get_str("TARGET") == "vda"


def test_get_vector_multiple():
    template = DynamicTemplate()
    template.add_vector("DISK")
    template.add_vector("DISK")
    assert len(template.get_vectors("DISK")) == 2
    with pytest.raises(MultipleMatchesError):
        template.get_vector("DISK")


def test_value_accessors(template):
    assert template.get_str("NAME") == "web-0"
    assert template.get_int("MEMORY") == 512
    assert template.get_id("MEMORY") == 512
    assert template.get_str_from_vector("NIC", "NETWORK") == "private"
    with pytest.raises(TypeMismatchError):
        template.get_int("NAME")


def test_exists_covers_pairs_and_vectors(template):
    assert template.exists("NAME")
    assert template.exists("DISK")
    assert not template.exists("CPU")


def test_delete_removes_pairs_and_vectors():
    template = DynamicTemplate()
    template.add_pair("DISK", "legacy")
    template.add_vector("DISK")
    template.add_pair("NAME", "x")
    template.add_vector("DISK")
    template.delete("DISK")
    assert template.keys() == ["NAME"]


def test_add_pair_to_vector_creates_then_reuses():
    template = DynamicTemplate()
    template.add_pair_to_vector("os", "arch", "x86_64")
    template.add_pair_to_vector("OS", "BOOT", "disk0")
    assert len(template.get_vectors("OS")) == 1
    assert template.serialize() == 'OS=[\n    ARCH="x86_64",\n    BOOT="disk0" ]'


def test_add_pair_to_vector_ambiguous_target():
    template = DynamicTemplate()
    template.add_vector("OS")
    template.add_vector("OS")
    with pytest.raises(MultipleMatchesError):
        template.add_pair_to_vector("OS", "ARCH", "x86_64")


def test_match_pair_top_level_and_nested(template):
    assert template.match_pair("NAME", "web-0")
    assert template.match_pair("NETWORK", "private")
    assert not template.match_pair("NETWORK", "public")
    assert not template.match_pair("DISK", "")


def test_set_name_and_description_replace_existing():
    template = DynamicTemplate()
    template.add_pair("NAME", "old")
    template.add_pair("CPU", "1")
    template.set_name("new")
    template.set_description("first")
    template.set_description("second")
    assert template.get_str("NAME") == "new"
    assert template.get_pairs("DESCRIPTION") == [Pair("DESCRIPTION", "second")]


def test_build_error_leaves_document_usable():
    template = DynamicTemplate()
    template.add_pair("NAME", "x")
    with pytest.raises(TypeMismatchError):
        template.add_pair("CPU", 0.5)
    assert template.serialize() == 'NAME="x"'


def test_append_parsed_elements():
    template = DynamicTemplate()
    template.append(Vector(key="NIC", pairs=[Pair("IP", "1.2.3.4")]))
    assert template.get_vector("NIC").get_str("IP") == "1.2.3.4"
    assert len(template) == 1


def test_to_xml_layout():
    template = DynamicTemplate()
    template.add_pair("NAME", "a<b")
    template.add_vector("NIC").add_pair("IP", "1.2.3.4")
    assert template.to_xml() == "<TEMPLATE><NAME>a&lt;b</NAME><NIC><IP>1.2.3.4</IP></NIC></TEMPLATE>"
