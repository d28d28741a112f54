"""Shared fixtures: sample OpenNebula bodies and a transport recording calls."""

from typing import Any

import pytest

from onetemplate.client import Response
from onetemplate.errors import TransportFault


class FakeTransport:
    """Answers calls from a method -> body table and records every call."""

    def __init__(self, responses: dict[str, Any] | None = None):
        self.responses = dict(responses or {})
        self.calls: list[tuple] = []

    def call(self, method: str, *args: Any) -> Response:
        self.calls.append((method, *args))
        body = self.responses.get(method, "")
        if isinstance(body, Exception):
            raise body
        return Response(method=method, body=body)

    def fail(self, method: str, message: str, code: int = 0x0400) -> None:
        self.responses[method] = TransportFault(method, message, code)


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


VM_TEMPLATE_XML = """<TEMPLATE>
  <CONTEXT>
    <NETWORK><![CDATA[YES]]></NETWORK>
    <SSH_PUBLIC_KEY><![CDATA[ssh-ed25519 AAAA]]></SSH_PUBLIC_KEY>
  </CONTEXT>
  <CPU><![CDATA[0.5]]></CPU>
  <DISK>
    <DISK_ID><![CDATA[0]]></DISK_ID>
    <IMAGE_ID><![CDATA[119]]></IMAGE_ID>
    <TARGET><![CDATA[vda]]></TARGET>
  </DISK>
  <DISK>
    <DISK_ID><![CDATA[1]]></DISK_ID>
    <IMAGE_ID><![CDATA[120]]></IMAGE_ID>
  </DISK>
  <GRAPHICS>
    <LISTEN><![CDATA[0.0.0.0]]></LISTEN>
    <TYPE><![CDATA[VNC]]></TYPE>
  </GRAPHICS>
  <MEMORY><![CDATA[512]]></MEMORY>
  <NIC>
    <IP><![CDATA[10.0.0.2]]></IP>
    <NETWORK><![CDATA[private]]></NETWORK>
    <NIC_ID><![CDATA[0]]></NIC_ID>
  </NIC>
  <SCHED_ACTION>
    <ACTION><![CDATA[terminate]]></ACTION>
    <ID><![CDATA[0]]></ID>
    <TIME><![CDATA[1700000000]]></TIME>
  </SCHED_ACTION>
  <VCPU><![CDATA[2]]></VCPU>
  <VMID><![CDATA[42]]></VMID>
</TEMPLATE>"""


IMAGE_XML = """<IMAGE>
  <ID>7</ID>
  <UID>0</UID>
  <GID>0</GID>
  <UNAME>oneadmin</UNAME>
  <GNAME>oneadmin</GNAME>
  <NAME>alpine</NAME>
  <PERMISSIONS>
    <OWNER_U>1</OWNER_U>
    <OWNER_M>1</OWNER_M>
    <OWNER_A>0</OWNER_A>
    <GROUP_U>1</GROUP_U>
    <GROUP_M>0</GROUP_M>
    <GROUP_A>0</GROUP_A>
    <OTHER_U>0</OTHER_U>
    <OTHER_M>0</OTHER_M>
    <OTHER_A>0</OTHER_A>
  </PERMISSIONS>
  <TYPE>0</TYPE>
  <DISK_TYPE>0</DISK_TYPE>
  <PERSISTENT>0</PERSISTENT>
  <REGTIME>1700000000</REGTIME>
  <SOURCE><![CDATA[/var/lib/one/datastores/1/abc]]></SOURCE>
  <PATH><![CDATA[]]></PATH>
  <FSTYPE><![CDATA[]]></FSTYPE>
  <SIZE>256</SIZE>
  <STATE>1</STATE>
  <RUNNING_VMS>2</RUNNING_VMS>
  <DATASTORE_ID>1</DATASTORE_ID>
  <DATASTORE>default</DATASTORE>
  <VMS>
    <ID>3</ID>
    <ID>5</ID>
  </VMS>
  <CLONES/>
  <APP_CLONES/>
  <TEMPLATE>
    <DEV_PREFIX><![CDATA[vd]]></DEV_PREFIX>
    <TYPE><![CDATA[OS]]></TYPE>
  </TEMPLATE>
</IMAGE>"""


IMAGE_POOL_XML = """<IMAGE_POOL>
  <IMAGE><ID>7</ID><NAME>alpine</NAME><STATE>1</STATE><TEMPLATE/></IMAGE>
  <IMAGE><ID>8</ID><NAME>debian</NAME><STATE>2</STATE><TEMPLATE/></IMAGE>
  <IMAGE><ID>9</ID><NAME>debian</NAME><STATE>2</STATE><TEMPLATE/></IMAGE>
</IMAGE_POOL>"""


DOCUMENT_POOL_XML = """<DOCUMENT_POOL>
  <DOCUMENT>
    <ID>10</ID>
    <NAME>web</NAME>
    <TYPE>100</TYPE>
    <TEMPLATE>
      <BODY><![CDATA[{"name":"web"}]]></BODY>
      <LABELS>
        <TIER><![CDATA[front]]></TIER>
      </LABELS>
    </TEMPLATE>
  </DOCUMENT>
  <DOCUMENT>
    <ID>11</ID>
    <NAME>db</NAME>
    <TYPE>100</TYPE>
    <TEMPLATE>
      <BODY><![CDATA[{"name":"db"}]]></BODY>
      <LABELS>
        <TIER><![CDATA[back]]></TIER>
      </LABELS>
    </TEMPLATE>
  </DOCUMENT>
</DOCUMENT_POOL>"""


VDC_XML = """<VDC>
  <ID>100</ID>
  <NAME>research</NAME>
  <GROUPS><ID>1</ID><ID>4</ID></GROUPS>
  <CLUSTERS>
    <CLUSTER><ZONE_ID>0</ZONE_ID><CLUSTER_ID>101</CLUSTER_ID></CLUSTER>
  </CLUSTERS>
  <HOSTS/>
  <DATASTORES>
    <DATASTORE><ZONE_ID>0</ZONE_ID><DATASTORE_ID>2</DATASTORE_ID></DATASTORE>
  </DATASTORES>
  <VNETS/>
  <TEMPLATE>
    <DESCRIPTION><![CDATA[research vdc]]></DESCRIPTION>
  </TEMPLATE>
</VDC>"""


VM_XML = f"""<VM>
  <ID>42</ID>
  <UID>2</UID>
  <GID>1</GID>
  <UNAME>alice</UNAME>
  <GNAME>users</GNAME>
  <NAME>web-0</NAME>
  <LAST_POLL>0</LAST_POLL>
  <STATE>3</STATE>
  <LCM_STATE>3</LCM_STATE>
  <DEPLOY_ID>one-42</DEPLOY_ID>
  <LOCK>
    <LOCKED>1</LOCKED>
    <OWNER>0</OWNER>
    <TIME>1700000000</TIME>
    <REQ_ID>-1</REQ_ID>
  </LOCK>
  {VM_TEMPLATE_XML}
  <USER_TEMPLATE>
    <ERROR><![CDATA[out of capacity]]></ERROR>
    <LABELS><![CDATA[web]]></LABELS>
  </USER_TEMPLATE>
</VM>"""


VNET_XML = """<VNET>
  <ID>0</ID>
  <NAME>private</NAME>
  <CLUSTERS><ID>0</ID></CLUSTERS>
  <BRIDGE>br0</BRIDGE>
  <VN_MAD>bridge</VN_MAD>
  <USED_LEASES>3</USED_LEASES>
  <VROUTERS/>
  <TEMPLATE>
    <AR>
      <AR_ID><![CDATA[0]]></AR_ID>
      <IP><![CDATA[10.0.0.1]]></IP>
      <SIZE><![CDATA[254]]></SIZE>
      <TYPE><![CDATA[IP4]]></TYPE>
    </AR>
    <DNS><![CDATA[10.0.0.254]]></DNS>
    <VN_MAD><![CDATA[bridge]]></VN_MAD>
  </TEMPLATE>
</VNET>"""


@pytest.fixture
def vm_template_xml() -> str:
    return VM_TEMPLATE_XML


@pytest.fixture
def image_xml() -> str:
    return IMAGE_XML
