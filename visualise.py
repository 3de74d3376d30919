import cv2
import numpy as np
import matplotlib.pyplot as plt

from transform import forward_points


def draw_control_points(img, image_points, labels=None, color=(0, 50, 250)):
    """Draw control points (and optional labels) on a copy of the map image."""
    result = img.copy()
    for i, (x, y) in enumerate(image_points):
        centre = (int(round(x)), int(round(y)))
        cv2.circle(result, centre, 10, color, 2)
        cv2.circle(result, centre, 2, color, -1)
        if labels and labels[i]:
            cv2.putText(result, str(labels[i]), (centre[0] + 12, centre[1] - 5),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.4, color, 1)
    return result


def residual_vectors(params, image_points, map_points):
    """Observed minus predicted map coordinates, one row per control point."""
    predicted = np.asarray(forward_points(params, image_points), dtype=float)
    observed = np.asarray(map_points, dtype=float).reshape(-1, 2)
    return observed - predicted


def plot_residuals(params, image_points, map_points, title="Control point residuals", scale=None, show=True):
    """Quiver plot of residuals at each observed map position.

    scale exaggerates the arrows; by default the longest arrow is drawn at
    a tenth of the point spread.
    """
    observed = np.asarray(map_points, dtype=float).reshape(-1, 2)
    residuals = residual_vectors(params, image_points, map_points)

    if scale is None:
        longest = np.max(np.hypot(residuals[:, 0], residuals[:, 1])) if len(residuals) else 0.0
        spread = np.ptp(observed, axis=0).max() if len(observed) else 0.0
        scale = (0.1 * spread / longest) if longest > 0 and spread > 0 else 1.0

    fig, ax = plt.subplots(figsize=(10, 8))
    ax.scatter(observed[:, 0], observed[:, 1], c="r", marker="o", s=30)
    ax.quiver(observed[:, 0], observed[:, 1], residuals[:, 0] * scale, residuals[:, 1] * scale,
              angles="xy", scale_units="xy", scale=1, color="b")
    ax.set_xlabel("X (map units)")
    ax.set_ylabel("Y (map units)")
    ax.set_title(f"{title} (x{scale:.3g})")
    ax.set_aspect("equal", adjustable="datalim")
    plt.tight_layout()
    if show:
        plt.show()
    return fig
