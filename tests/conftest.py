import pytest

OFFERING_TABLE = """
<table>
<tr><td>Class Nbr</td><td>Course</td><td>Section</td><td>Days</td><td>Time</td>
    <td>Room</td><td>Enrl Cap</td><td>Enrolled</td><td>Remarks</td></tr>
<tr><td>1234</td><td>CCPROG1</td><td>S11</td><td>MW</td><td>0915 - 1045</td>
    <td>GK210</td><td>45</td><td>40</td><td>&nbsp;</td></tr>
<tr><td colspan="9">DELA CRUZ, JUAN</td></tr>
<tr><td>&nbsp;</td><td></td><td></td><td>F</td><td>1300 - 1430</td>
    <td>GK304</td><td></td><td></td><td></td></tr>
<tr><td>2345</td><td>CCPROG1</td><td>S12</td><td>TBA</td><td>TBA</td>
    <td></td><td>45</td><td>0</td><td>Dissolved</td></tr>
<tr><td></td><td></td><td></td><td>H</td><td>0800 - 0930</td>
    <td>GK101</td><td></td><td></td><td></td></tr>
<tr><td>3456</td><td>CCPROG1</td><td>S13</td><td>MW</td><td>0915 - 1045</td>
    <td>GK211</td><td>45</td><td>12</td><td></td></tr>
</table>
"""


def _mls_page(offering: str) -> str:
    """The nesting the MLS site wraps its offering table in."""
    return f"""<html><body>
    <div>logo</div><div>nav</div><div>user</div><div>spacer</div>
    <table><tbody><tr><td>
      <table><tbody>
        <tr><td>banner</td></tr>
        <tr><td>menu</td></tr>
        <tr><td>
          <table><tbody><tr>
            <td>side</td>
            <td><form action="view_course_offerings">{offering}</form></td>
          </tr></tbody></table>
        </td></tr>
      </tbody></table>
    </td></tr></tbody></table>
    </body></html>"""


def _wrapped_page(offering: str) -> str:
    """Same table, but not at the fixed location."""
    return f"""<html><body>
    <table><tr><td>Search results</td></tr>
      <tr><td>{offering}</td></tr>
    </table>
    </body></html>"""


@pytest.fixture
def offering_table():
    return OFFERING_TABLE


@pytest.fixture
def header_only_table():
    return OFFERING_TABLE.split("<tr><td>1234")[0] + "</table>"


@pytest.fixture
def mls_page():
    return _mls_page


@pytest.fixture
def wrapped_page():
    return _wrapped_page
