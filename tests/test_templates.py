import pytest

from onetemplate.errors import NotFoundError, ParseError
from onetemplate.nodes import Pair, Vector
from onetemplate.templates import (
    NIC,
    AddressRange,
    AddressRangeKey,
    Disk,
    DiskKey,
    DocumentTemplate,
    ImageTemplate,
    ImageTemplateKey,
    ImageType,
    NicKey,
    VdcTemplate,
    VirtualNetworkTemplate,
    VirtualNetworkTemplateKey,
)


def test_disk_end_to_end():
    disk = Disk()
    disk.add(DiskKey.IMAGE_ID, "119")
    assert disk.serialize() == 'DISK=[\n    IMAGE_ID="119" ]'
    assert disk.get_id(DiskKey.IMAGE_ID) == 119
    # the identifier of a disk is DISK_ID, which is not set yet
    with pytest.raises(NotFoundError):
        disk.id


def test_disk_id_reads_disk_id():
    disk = Disk()
    disk.add(DiskKey.DISK_ID, 2)
    disk.add(DiskKey.TARGET, "vdb")
    assert disk.id == 2
    assert disk.get(DiskKey.TARGET) == "vdb"


def test_disk_id_missing():
    with pytest.raises(NotFoundError):
        Disk().id


def test_facade_wraps_parsed_vector():
    vector = Vector(key="NIC", pairs=[Pair("NIC_ID", "0"), Pair("IP", "10.0.0.2")])
    nic = NIC(vector)
    assert nic.vector is vector
    nic.add(NicKey.NETWORK, "private")
    assert vector.get_str("NETWORK") == "private"
    assert nic.id == 0
    assert nic.key == "NIC"


def test_facade_accepts_unlisted_keys():
    nic = NIC()
    nic.add("CUSTOM_ATTR", "x")
    assert nic.exists("CUSTOM_ATTR")
    nic.delete("CUSTOM_ATTR")
    assert not nic.exists("CUSTOM_ATTR")


def test_facade_equality():
    assert Disk(Vector(key="DISK", pairs=[Pair("SIZE", "1")])) == Disk(Vector(key="DISK", pairs=[Pair("SIZE", "1")]))
    assert Disk() != NIC()


def test_image_template_set_type_replaces():
    template = ImageTemplate()
    template.set_name("alpine")
    template.set_type(ImageType.DATABLOCK)
    template.set_type(ImageType.OS)
    template.add(ImageTemplateKey.SIZE, 1024)
    assert template.serialize() == 'NAME="alpine"\nTYPE="OS"\nSIZE="1024"'
    assert template.get(ImageTemplateKey.TYPE) == "OS"
    assert template.get_int(ImageTemplateKey.SIZE) == 1024


def test_image_template_parse_keeps_everything_dynamic():
    template = ImageTemplate.parse("<TEMPLATE><DEV_PREFIX>vd</DEV_PREFIX><TYPE>OS</TYPE></TEMPLATE>")
    assert template.get(ImageTemplateKey.DEV_PREFIX) == "vd"
    assert template.dynamic.keys() == ["DEV_PREFIX", "TYPE"]


def test_vdc_and_document_templates():
    vdc = VdcTemplate()
    vdc.set_name("research")
    vdc.set_description("lab")
    assert vdc.serialize() == 'NAME="research"\nDESCRIPTION="lab"'

    document = DocumentTemplate.parse("<TEMPLATE><BODY>{}</BODY><TIER>front</TIER></TEMPLATE>")
    assert document.match_pair("TIER", "front")
    assert document.get("BODY") == "{}"


def test_address_range():
    ar = AddressRange()
    ar.add(AddressRangeKey.TYPE, "IP4")
    ar.add(AddressRangeKey.IP, "10.0.0.1")
    ar.add(AddressRangeKey.SIZE, 254)
    assert ar.serialize() == 'AR=[\n    TYPE="IP4",\n    IP="10.0.0.1",\n    SIZE="254" ]'


def test_virtual_network_template_serialize_order():
    template = VirtualNetworkTemplate()
    template.add(VirtualNetworkTemplateKey.NAME, "private")
    ar = AddressRange()
    ar.add(AddressRangeKey.TYPE, "ETHER")
    ar.add(AddressRangeKey.SIZE, 10)
    template.add_ar(ar)
    template.set_vn_mad("bridge")
    assert template.serialize() == (
        'VN_MAD="bridge"\n'
        'AR=[\n    TYPE="ETHER",\n    SIZE="10" ]\n'
        'NAME="private"'
    )


def test_virtual_network_template_parse():
    xml = (
        "<TEMPLATE>"
        "<AR><AR_ID>0</AR_ID><TYPE>IP4</TYPE></AR>"
        "<DNS>10.0.0.254</DNS>"
        "<AR><AR_ID>1</AR_ID><TYPE>ETHER</TYPE></AR>"
        "<VN_MAD>bridge</VN_MAD>"
        "</TEMPLATE>"
    )
    template = VirtualNetworkTemplate.parse(xml)
    assert template.vn_mad == "bridge"
    assert [ar.id for ar in template.ars] == [0, 1]
    assert template.dynamic.keys() == ["DNS"]
    assert not template.dynamic.exists("VN_MAD")
    assert template.exists("VN_MAD")


def test_virtual_network_template_rejects_vector_vn_mad():
    with pytest.raises(ParseError):
        VirtualNetworkTemplate.parse("<TEMPLATE><VN_MAD><A>1</A></VN_MAD></TEMPLATE>")


def test_template_view_str_and_repr():
    template = VdcTemplate()
    template.set_name("x")
    assert str(template) == 'NAME="x"'
    assert repr(template) == "VdcTemplate('NAME=\"x\"')"


def test_virtual_network_accessors_cover_bound_parts():
    template = VirtualNetworkTemplate.parse(
        "<TEMPLATE><VN_MAD>bridge</VN_MAD><AR><AR_ID>0</AR_ID><IP>10.0.0.1</IP></AR><DNS>10.0.0.254</DNS></TEMPLATE>"
    )
    assert template.get(VirtualNetworkTemplateKey.VN_MAD) == "bridge"
    assert template.match_pair("IP", "10.0.0.1")
    assert template.exists("AR")

    template.delete("AR")
    template.delete("VN_MAD")
    assert template.ars == []
    assert not template.exists("AR")
    assert template.serialize() == 'DNS="10.0.0.254"'
