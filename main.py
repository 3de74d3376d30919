import json
import cv2

import config
from models import ControlPoint
from logging_setup import configure_logging
from find_best import score_crs_candidates, select_best
from georef import AffineGeoref, georeference_points
from projection import default_projector
from visualise import draw_control_points, plot_residuals


def load_control_points(path):
    """Load control points from JSON: {"points": [{"x", "y", "lng", "lat", "label"?}, ...]}."""
    with open(path, "r") as f:
        data = json.load(f)
    points = []
    for p in data["points"]:
        points.append(ControlPoint(
            p["x"], p["y"],
            p["lng"], p["lat"],
            label=p.get("label"),
        ))
    return points


def print_control_residuals(controls, georef, map_points):
    """Print each control point's georeferenced position and its residual."""
    predicted = georeference_points([c.image_point for c in controls], georef)
    for c, (X, Y), (mx, my) in zip(controls, predicted, map_points):
        print(f"  {c.label or '-':>4}: X={X:.2f} Y={Y:.2f}  dX={mx - X:+.2f} dY={my - Y:+.2f}")


def main():
    configure_logging()

    print("Loading control points...")
    controls = load_control_points(config.CONTROL_POINTS_FILE)
    image_points = [c.image_point for c in controls]
    geo_points = [c.geo_point for c in controls]
    print(f"Loaded {len(controls)} control points")

    mode = config.DEFAULT_TRANSFORM_MODE
    y_axis_mode = config.DEFAULT_Y_AXIS_MODE
    metric = config.DEFAULT_SCORE_METRIC
    print(f"\nScoring {len(config.CRS_CANDIDATES)} CRS candidates (mode={mode}, y-axis={y_axis_mode})...")

    projector = default_projector()
    scores = score_crs_candidates(geo_points, image_points, config.CRS_CANDIDATES,
                                  mode=mode, y_axis_mode=y_axis_mode, projector=projector)
    for s in scores:
        print(f"  {s.crs:<12} RMSE={s.rmse:10.3f}  ratio={s.ratio:.6f}")
    best = select_best(scores, metric)

    print("\n" + "=" * 50)
    print(f"BEST CRS: {best.crs}")
    print("=" * 50)

    map_points = [projector.project(config.GEOGRAPHIC_CRS, best.crs, p) for p in geo_points]
    georef = AffineGeoref(mode=mode, y_axis_mode=y_axis_mode)
    georef.fit(image_points, map_points)
    georef.report()
    print_control_residuals(controls, georef, map_points)

    if config.DISPLAY_RESIDUALS:
        img = cv2.imread(config.MAP_IMAGE_PATH)
        if img is not None:
            marked = draw_control_points(img, image_points, labels=[c.label for c in controls])
            cv2.imwrite("control_points.png", marked)
            print("Control points drawn to control_points.png")
        else:
            print(f"Warning: could not load {config.MAP_IMAGE_PATH}; skipping control point overlay")
        plot_residuals(georef.params, image_points, map_points, title=f"Residuals in {best.crs}")


if __name__ == "__main__":
    main()
