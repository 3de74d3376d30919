import json
import os
from georef import AffineGeoref
from main import load_control_points, print_control_residuals
from models import ControlPoint

SAMPLE_FILE = os.path.join(os.path.dirname(__file__), "..", "control_points.json")


class TestLoadControlPoints:
    def test_bundled_sample(self):
        points = load_control_points(SAMPLE_FILE)
        assert len(points) == 9
        assert points[0].label == "1"
        assert points[0].geo_point[0] == 135.53918377940292

    def test_optional_label(self, tmp_path):
        path = tmp_path / "points.json"
        path.write_text(json.dumps({"points": [{"x": 1, "y": 2, "lng": 135.0, "lat": 35.0}]}))
        points = load_control_points(str(path))
        assert points[0].label is None
        assert points[0].image_point == (1, 2)


class TestPrintControlResiduals:
    def test_lists_each_point(self, capsys):
        controls = [
            ControlPoint(0, 0, 0.0, 0.0, label="a"),
            ControlPoint(10, 0, 0.0, 0.0, label="b"),
            ControlPoint(0, 10, 0.0, 0.0),
        ]
        map_points = [(100.0, 50.0), (120.0, 50.0), (100.0, 30.0)]
        georef = AffineGeoref()
        georef.fit([c.image_point for c in controls], map_points)
        print_control_residuals(controls, georef, map_points)
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 3
        assert "a: X=100.00 Y=50.00" in lines[0]
        assert "dX=+0.00" in lines[1] or "dX=-0.00" in lines[1]
        assert lines[2].strip().startswith("-:")
