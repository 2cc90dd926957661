"""draw.io渲染测试。"""

import xml.etree.ElementTree as ET

import pytest

from conftest import task
from pertnet.engine import calculate_pert
from pertnet.render import DiagramLayout, DrawioRenderer, task_label
from pertnet.render.drawio import BOTTLENECK_FILL, CRITICAL_FILL, NORMAL_FILL


@pytest.fixture
def result():
    return calculate_pert([
        task("A", 1, 1, 1, description="<b>setup</b> & \"prep\""),
        task("B", 2, 2, 2),
        task("C", 5, 5, 5),
        task("D", 1, 1, 1, ["A", "B", "C"]),
    ])


def cells(xml_text):
    model = ET.fromstring(xml_text)
    assert model.tag == "mxGraphModel"
    return model.find("root").findall("mxCell")


def test_document_structure(result):
    all_cells = cells(DrawioRenderer().render(result))
    assert all_cells[0].get("id") == "0"
    assert all_cells[1].get("id") == "1"
    assert all_cells[1].get("parent") == "0"

    vertices = [c for c in all_cells if c.get("vertex") == "1"]
    edges = [c for c in all_cells if c.get("edge") == "1"]
    assert [v.get("id") for v in vertices] == ["A", "B", "C", "D"]
    assert [(e.get("source"), e.get("target")) for e in edges] == list(result.edges)
    assert [e.get("id") for e in edges] == ["edge-A-D-1", "edge-B-D-2", "edge-C-D-3"]


def test_fill_follows_classification(result):
    # A时差4（普通），B时差3（普通），C、D关键
    vertices = {c.get("id"): c for c in cells(DrawioRenderer().render(result)) if c.get("vertex") == "1"}
    assert vertices["A"].get("style").endswith(NORMAL_FILL)
    assert vertices["C"].get("style").endswith(CRITICAL_FILL)
    assert vertices["D"].get("style").endswith(CRITICAL_FILL)


def test_bottleneck_fill():
    result = calculate_pert([
        task("A", 1, 1, 1),
        task("B", 2, 2, 2),
        task("C", 1, 1, 1, ["A", "B"]),
    ])
    vertices = {c.get("id"): c for c in cells(DrawioRenderer().render(result)) if c.get("vertex") == "1"}
    assert vertices["A"].get("style").endswith(BOTTLENECK_FILL)
    assert "BOTTLENECK" in vertices["A"].get("value")


def test_label_is_escaped(result):
    xml_text = DrawioRenderer().render(result)
    assert "&lt;b&gt;A: &lt;b&gt;setup&lt;/b&gt; &amp; &quot;prep&quot;" in xml_text

    vertex = next(c for c in cells(xml_text) if c.get("id") == "A")
    assert vertex.get("value") == task_label(result.get_task("A"))


def test_label_content(result):
    label = task_label(result.get_task("D"))
    assert label.startswith("<b>D: N/A</b><br>")
    assert "TE: 1.00 | Var: 0.00" in label
    assert "ES: 5.00 | EF: 6.00" in label
    assert "LS: 5.00 | LF: 6.00" in label
    assert "Slack: 0.00" in label
    assert label.endswith("<br><b>CRITICAL</b>")


def test_grid_layout():
    result = calculate_pert([task(str(i), 1, 1, 1) for i in range(7)])
    coords = DrawioRenderer().positions(result)
    assert coords["0"] == (50, 50)
    assert coords["4"] == (850, 50)
    assert coords["6"] == (250, 200)


def test_layered_layout(result):
    coords = DrawioRenderer(DiagramLayout(mode="layered")).positions(result)
    assert coords["A"] == (50, 50)
    assert coords["B"] == (50, 200)
    assert coords["C"] == (50, 350)
    assert coords["D"] == (250, 50)


def test_geometry(result):
    renderer = DrawioRenderer(DiagramLayout(width=120, height=80))
    vertex = next(c for c in cells(renderer.render(result)) if c.get("id") == "B")
    geometry = vertex.find("mxGeometry")
    assert geometry.get("x") == "250"
    assert geometry.get("y") == "50"
    assert geometry.get("width") == "120"
    assert geometry.get("height") == "80"
    assert geometry.get("as") == "geometry"


def test_invalid_layout():
    with pytest.raises(ValueError):
        DiagramLayout(mode="circle")
    with pytest.raises(ValueError):
        DiagramLayout(columns=0)


def test_render_does_not_modify_result(result):
    before = result.to_dict()
    DrawioRenderer(DiagramLayout(mode="layered")).render(result)
    assert result.to_dict() == before


def test_save(result, tmp_path):
    path = tmp_path / "pert.drawio"
    DrawioRenderer().save(result, str(path))
    assert cells(path.read_text(encoding="utf-8"))
