import io
import random

import pytest

from rtlab.camera import Camera
from rtlab.hitables import HitableList, Sphere
from rtlab.materials import Lambertian, Material
from rtlab.render import (
    MAX_DEPTH,
    color,
    demo_scene,
    main,
    random_scene,
    render,
    write_ppm,
)
from rtlab.vec3 import Ray, Vec3


class _Absorber(Material):
    def scatter(self, ray_in, rec, rng):
        return None


def _camera(width, height):
    return Camera(Vec3(13, 2, 3), Vec3(0, 0, 0), Vec3(0, 1, 0), 20, width / height, 0.1, 10.0)


def test_sky_straight_up_is_top_colour():
    result = color(Ray(Vec3(0, 0, 0), Vec3(0, 1, 0)), HitableList(), 0, random.Random(0))
    assert result == Vec3(0.5, 0.7, 1.0)


def test_sky_straight_down_is_white():
    result = color(Ray(Vec3(0, 0, 0), Vec3(0, -1, 0)), HitableList(), 0, random.Random(0))
    assert result == Vec3(1.0, 1.0, 1.0)


def test_depth_limit_returns_black():
    world = HitableList([Sphere(Vec3(0, 0, -1), 0.5, Lambertian(Vec3(1, 1, 1)))])
    ray = Ray(Vec3(0, 0, 0), Vec3(0, 0, -1))
    assert color(ray, world, MAX_DEPTH, random.Random(0)) == Vec3(0, 0, 0)


def test_absorbed_ray_is_black():
    world = HitableList([Sphere(Vec3(0, 0, -1), 0.5, _Absorber())])
    ray = Ray(Vec3(0, 0, 0), Vec3(0, 0, -1))
    assert color(ray, world, 0, random.Random(0)) == Vec3(0, 0, 0)


def test_diffuse_colour_stays_within_unit_range():
    world = demo_scene()
    rng = random.Random(4)
    for _ in range(20):
        c = color(Ray(Vec3(0, 0, 0), Vec3(rng.uniform(-1, 1), rng.uniform(-1, 1), -1)), world, 0, rng)
        assert all(0.0 <= comp <= 1.0 for comp in c)


def test_render_pixel_count_and_range():
    pixels = list(render(demo_scene(), _camera(3, 2), 3, 2, 1, random.Random(1)))
    assert len(pixels) == 6
    assert all(len(p) == 3 and all(0 <= c <= 255 for c in p) for p in pixels)


def test_render_is_reproducible_with_seed():
    first = list(render(demo_scene(), _camera(2, 2), 2, 2, 2, random.Random(7)))
    second = list(render(demo_scene(), _camera(2, 2), 2, 2, 2, random.Random(7)))
    assert first == second


def test_render_rejects_zero_samples():
    with pytest.raises(ValueError):
        list(render(demo_scene(), _camera(2, 2), 2, 2, 0, random.Random(0)))


def test_render_rejects_bad_size():
    with pytest.raises(ValueError):
        list(render(demo_scene(), _camera(2, 2), 0, 2, 1, random.Random(0)))


def test_write_ppm_format():
    out = io.StringIO()
    write_ppm(out, 2, 1, [(1, 2, 3), (255, 0, 10)])
    assert out.getvalue() == "P3\n2 1\n255\n1 2 3\n255 0 10\n"


def test_random_scene_structure():
    world = random_scene(random.Random(42))
    spheres = list(world)
    assert spheres[0].radius == 1000
    assert spheres[0].center == Vec3(0, -1000, 0)
    assert [s.radius for s in spheres[-3:]] == [1.0, 1.0, 1.0]
    assert all(s.radius == 0.2 for s in spheres[1:-3])
    assert len(world) <= 1 + 22 * 22 + 3


def test_random_scene_is_seeded():
    a = [s.center for s in random_scene(random.Random(5))]
    b = [s.center for s in random_scene(random.Random(5))]
    assert a == b


def test_demo_scene_has_five_spheres():
    world = demo_scene()
    assert len(world) == 5
    assert [s.radius for s in world][-1] < 0


def test_main_writes_ppm(tmp_path):
    out = tmp_path / "img.ppm"
    code = main(
        ["--width", "2", "--height", "2", "--samples", "1", "--output", str(out),
         "--seed", "1", "--scene", "demo", "--quiet"]
    )
    lines = out.read_text().splitlines()
    assert code == 0
    assert lines[:3] == ["P3", "2 2", "255"]
    assert len(lines) == 7


def test_main_echoes_pixels(tmp_path, capsys):
    out = tmp_path / "img.ppm"
    main(["--width", "2", "--height", "1", "--samples", "1", "--output", str(out),
          "--seed", "3", "--scene", "demo"])
    echoed = capsys.readouterr().out.splitlines()
    assert echoed == out.read_text().splitlines()[3:]


def test_main_rejects_non_positive_size(tmp_path):
    with pytest.raises(SystemExit):
        main(["--width", "0", "--output", str(tmp_path / "x.ppm")])