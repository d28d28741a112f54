import pytest
from pydantic import ValidationError

from conftest import DOCUMENT_POOL_XML, IMAGE_POOL_XML, VDC_XML, VM_XML, VNET_XML
from onetemplate.entities import (
    VM,
    DocumentPool,
    Image,
    ImagePool,
    ImageState,
    Lock,
    Permissions,
    Vdc,
    VirtualNetwork,
)
from onetemplate.filters import LockLevel, VMState
from onetemplate.templates import ImageTemplate, VMTemplate


def test_image(image_xml):
    image = Image.from_element(image_xml)
    assert image.id == 7
    assert image.name == "alpine"
    assert image.size == 256
    assert image.vms == [3, 5]
    assert image.clones == []
    assert image.datastore == "default"
    assert image.lock is None
    assert isinstance(image.template, ImageTemplate)
    assert image.template.get("TYPE") == "OS"


def test_image_state(image_xml):
    image = Image.from_element(image_xml)
    assert image.state() is ImageState.READY
    assert image.state_string() == "READY"

    image.state_raw = 42
    with pytest.raises(ValueError, match="not currently handled"):
        image.state()


def test_permissions(image_xml):
    permissions = Image.from_element(image_xml).permissions
    assert permissions.owner_u == 1
    assert permissions.group_m == 0
    assert str(permissions) == "640"
    assert permissions.to_args(7) == [7, 1, 1, 0, 1, 0, 0, 0, 0, 0]


def test_permissions_default_to_unchanged():
    assert Permissions(owner_u=1).to_args(3) == [3, 1, -1, -1, -1, -1, -1, -1, -1, -1]


def test_image_pool():
    pool = ImagePool.from_element(IMAGE_POOL_XML)
    assert [image.id for image in pool.images] == [7, 8, 9]
    assert pool.images[1].state() is ImageState.USED


def test_missing_id_is_a_validation_error():
    with pytest.raises(ValidationError):
        Image.from_element("<IMAGE><NAME>x</NAME></IMAGE>")


def test_document_pool_templates_are_dynamic():
    pool = DocumentPool.from_element(DOCUMENT_POOL_XML)
    assert [document.name for document in pool.documents] == ["web", "db"]
    assert pool.documents[1].template.match_pair("TIER", "back")
    assert pool.documents[0].type == "100"


def test_vdc():
    vdc = Vdc.from_element(VDC_XML)
    assert vdc.groups == [1, 4]
    assert [(c.zone_id, c.cluster_id) for c in vdc.clusters] == [(0, 101)]
    assert vdc.hosts == []
    assert vdc.datastores[0].datastore_id == 2
    assert vdc.template.get("DESCRIPTION") == "research vdc"


def test_vm():
    vm = VM.from_element(VM_XML)
    assert vm.name == "web-0"
    assert vm.state() is VMState.ACTIVE
    assert vm.lock.level is LockLevel.USE
    assert isinstance(vm.template, VMTemplate)
    assert vm.template.get_capacity() == (0.5, 2, 512)
    assert vm.template.disks[0].get_id("IMAGE_ID") == 119
    assert vm.user_template.error == "out of capacity"
    assert vm.user_template.get("LABELS") == "web"


def test_unlocked_lock_has_no_level():
    assert Lock().level is None


def test_virtual_network():
    vnet = VirtualNetwork.from_element(VNET_XML)
    assert vnet.vn_mad == "bridge"
    assert vnet.clusters == [0]
    assert vnet.used_leases == 3
    assert vnet.template.vn_mad == "bridge"
    assert vnet.template.ars[0].get("IP") == "10.0.0.1"
    assert vnet.template.get("DNS") == "10.0.0.254"
