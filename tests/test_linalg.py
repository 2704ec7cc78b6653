import math

import pytest

from gridsphere.linalg import (
    Matrix4x4,
    Vector3,
    format_matrix,
    format_vector,
    make_affine_matrix,
    make_identity,
    make_orthographic_matrix,
    make_perspective_fov_matrix,
    make_rotate_x_matrix,
    make_rotate_y_matrix,
    make_rotate_z_matrix,
    make_scale_matrix,
    make_translate_matrix,
    make_viewport_matrix,
    transform,
)


IDENTITY_ENTRIES = [
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
]


SAMPLE = Matrix4x4((
    (3.2, 0.7, 9.6, 4.4),
    (5.5, 1.3, 7.8, 2.1),
    (6.9, 8.0, 2.6, 1.0),
    (0.5, 7.2, 5.1, 3.3),
))

SAMPLE_ENTRIES = [SAMPLE[i][j] for i in range(4) for j in range(4)]


def test_vector_arithmetic_round_trip():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-4.0, 0.5, 2.0)
    assert (a + b) - b == a
    assert -(-a) == a
    scaled = (a * 3.0) / 3.0
    assert (scaled.x, scaled.y, scaled.z) == pytest.approx((1.0, 2.0, 3.0), abs=1e-9)
    assert 2.0 * a == a * 2.0


def test_cross_of_axes():
    x = Vector3(1.0, 0.0, 0.0)
    y = Vector3(0.0, 1.0, 0.0)
    assert x.cross(y) == Vector3(0.0, 0.0, 1.0)
    assert y.cross(x) == Vector3(0.0, 0.0, -1.0)


def test_cross_is_orthogonal():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert math.isclose(c.dot(a), 0.0, abs_tol=1e-12)
    assert math.isclose(c.dot(b), 0.0, abs_tol=1e-12)


def test_length_and_normalize():
    v = Vector3(3.0, 4.0, 12.0)
    assert math.isclose(v.length() ** 2, v.dot(v))
    assert math.isclose(v.normalized().length(), 1.0)
    assert Vector3().length() == 0.0
    assert Vector3().normalized() == Vector3(0.0, 0.0, 0.0)


def test_identity_is_neutral():
    identity = make_identity()
    assert identity @ SAMPLE == SAMPLE
    assert SAMPLE @ identity == SAMPLE
    assert identity.inverse() == identity


def test_matrix_add_subtract_round_trip():
    other = make_rotate_y_matrix(0.7)
    result = (SAMPLE + other) - other
    entries = [result[i][j] for i in range(4) for j in range(4)]
    assert entries == pytest.approx(SAMPLE_ENTRIES, abs=1e-9)


def test_inverse_gives_identity():
    product = SAMPLE @ SAMPLE.inverse()
    entries = [product[i][j] for i in range(4) for j in range(4)]
    assert entries == pytest.approx(IDENTITY_ENTRIES, abs=1e-9)


def test_singular_inverse_raises():
    singular = Matrix4x4(((1, 2, 3, 4),) * 4)
    with pytest.raises(ValueError):
        singular.inverse()


def test_transpose_involution_and_entries():
    t = SAMPLE.transpose()
    assert t.transpose() == SAMPLE
    assert all(t[i][j] == SAMPLE[j][i] for i in range(4) for j in range(4))


def test_matrix_requires_four_by_four():
    with pytest.raises(ValueError):
        Matrix4x4(((1, 2, 3), (4, 5, 6), (7, 8, 9)))


def test_translate_and_scale():
    p = Vector3(1.0, 2.0, 3.0)
    offset = Vector3(5.0, -1.0, 0.5)
    assert transform(p, make_translate_matrix(offset)) == p + offset
    moved_back = transform(transform(p, make_translate_matrix(offset)),
                           make_translate_matrix(-offset))
    assert (moved_back.x, moved_back.y, moved_back.z) == pytest.approx((1.0, 2.0, 3.0), abs=1e-9)
    assert transform(p, make_scale_matrix(Vector3(2.0, 2.0, 2.0))) == p * 2.0


def test_rotations_preserve_length_and_invert():
    p = Vector3(1.0, 2.0, 3.0)
    for make in (make_rotate_x_matrix, make_rotate_y_matrix, make_rotate_z_matrix):
        r = make(0.8)
        q = transform(p, r)
        assert math.isclose(q.length(), p.length())
        product = r @ r.transpose()
        entries = [product[i][j] for i in range(4) for j in range(4)]
        assert entries == pytest.approx(IDENTITY_ENTRIES, abs=1e-9)


def test_rotate_z_quarter_turn():
    q = transform(Vector3(1.0, 0.0, 0.0), make_rotate_z_matrix(math.pi / 2))
    assert (q.x, q.y, q.z) == pytest.approx((0.0, 1.0, 0.0), abs=1e-9)


def test_affine_order_scale_rotate_translate():
    scale = Vector3(2.0, 3.0, 4.0)
    rotate = Vector3(0.3, -0.2, 1.1)
    translate = Vector3(7.0, 8.0, 9.0)
    p = Vector3(1.0, -1.0, 0.5)
    stepwise = transform(p, make_scale_matrix(scale))
    for m in (make_rotate_x_matrix(rotate.x), make_rotate_y_matrix(rotate.y),
              make_rotate_z_matrix(rotate.z), make_translate_matrix(translate)):
        stepwise = transform(stepwise, m)
    combined = transform(p, make_affine_matrix(scale, rotate, translate))
    assert (combined.x, combined.y, combined.z) == pytest.approx(
        (stepwise.x, stepwise.y, stepwise.z), abs=1e-9
    )


def test_perspective_maps_clip_planes_to_unit_depth():
    near, far = 0.1, 100.0
    proj = make_perspective_fov_matrix(0.45, 16 / 9, near, far)
    assert math.isclose(transform(Vector3(0.0, 0.0, near), proj).z, 0.0, abs_tol=1e-9)
    assert math.isclose(transform(Vector3(0.0, 0.0, far), proj).z, 1.0)


def test_orthographic_maps_box_to_ndc():
    ortho = make_orthographic_matrix(-160.0, 160.0, 200.0, 300.0, 0.0, 1000.0)
    corner = transform(Vector3(-160.0, 160.0, 0.0), ortho)
    assert (corner.x, corner.y, corner.z) == pytest.approx((-1.0, 1.0, 0.0), abs=1e-9)
    far_corner = transform(Vector3(200.0, 300.0, 1000.0), ortho)
    assert (far_corner.x, far_corner.y, far_corner.z) == pytest.approx((1.0, -1.0, 1.0), abs=1e-9)


def test_viewport_maps_ndc_to_screen():
    vp = make_viewport_matrix(10.0, 20.0, 1280.0, 720.0, 0.0, 1.0)
    assert transform(Vector3(0.0, 0.0, 0.0), vp) == Vector3(10.0 + 640.0, 20.0 + 360.0, 0.0)
    assert transform(Vector3(-1.0, 1.0, 0.0), vp) == Vector3(10.0, 20.0, 0.0)


def test_transform_zero_w_raises():
    proj = make_perspective_fov_matrix(0.45, 1.0, 0.1, 100.0)
    with pytest.raises(ValueError):
        transform(Vector3(1.0, 1.0, 0.0), proj)


def test_format_vector():
    assert format_vector(Vector3(1.0, 2.5, -3.0), "v") == "1.00 2.50 -3.00 v"


def test_format_matrix():
    text = format_matrix(make_identity(), "identity")
    lines = text.split("\n")
    assert lines[0] == "identity"
    assert lines[1] == "  1.00  0.00  0.00  0.00"
    assert len(lines) == 5