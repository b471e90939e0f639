# rtlab

`rtlab` is a small pure-Python path tracer that renders spheres made of
diffuse, metal and glass materials into a plain-text (P3) PPM image. It also
contains a set of classic data structures and algorithms: a B-tree, a
red-black tree, KMP string search, palindrome counting, n-sum problems and
binary-tree utilities.

It needs nothing beyond the Python 3.10+ standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Rendering

The `rtlab-render` command renders a scene and writes a PPM image:

```
rtlab-render --width 160 --height 90 --samples 4 --seed 1 --quiet
```

Options:

- `--width`, `--height`: image size in pixels (defaults 1920 and 1080).
- `--samples`: rays traced per pixel (default 10).
- `--output`: file to write (default `img.ppm`).
- `--seed`: seed for the random generator, for a repeatable image.
- `--scene`: `random` (default) for the large scene of many small spheres,
  or `demo` for the five-sphere scene.
- `--quiet`: do not echo each pixel to standard output; without it every
  pixel is printed as it is written.

Width, height and samples must be positive. Rendering in pure Python is slow,
so keep the image small and the sample count low while trying it out.

You can also render from code:

```python
import random

from rtlab.camera import Camera
from rtlab.render import random_scene, render, write_ppm
from rtlab.vec3 import Vec3

rng = random.Random(1)
world = random_scene(rng)
camera = Camera(Vec3(13, 2, 3), Vec3(0, 0, 0), Vec3(0, 1, 0), 20, 16 / 9, 0.1, 10.0)
pixels = render(world, camera, 160, 90, 4, rng)

with open("img.ppm", "w") as stream:
    write_ppm(stream, 160, 90, pixels)
```

`render` is a generator of gamma-corrected `(r, g, b)` tuples in the range
0–255, top row first, left to right.

### Building blocks

- `rtlab.vec3`: the immutable `Vec3` with arithmetic operators, `length`,
  `squared_length`, `unit` and `Vec3.parse`; the functions `dot`, `cross`
  and `unit_vector`; and `Ray` with `point_at_parameter`.
- `rtlab.hitables`: `Sphere` and `HitableList`. Their `hit(ray, t_min, t_max)`
  returns a `HitRecord` (`t`, `p`, `normal`, `material`) or `None`;
  `HitableList` reports the closest hit.
- `rtlab.materials`: `Lambertian`, `Metal` (fuzz is capped at 1) and
  `Dielectric`, whose `scatter` returns `(attenuation, scattered_ray)` or
  `None` when the ray is absorbed; plus `reflect`, `refract`, `schlick` and
  `random_in_unit_sphere`.
- `rtlab.camera`: `Camera` with vertical field of view in degrees, aspect
  ratio, aperture and focus distance, and `random_in_unit_disk`.
- `rtlab.render`: `color`, `random_scene`, `demo_scene`, `render`,
  `write_ppm` and the command's `main`.

Every function that uses randomness takes a `random.Random` instance, so a
seeded generator gives a repeatable image.

## Data structures and algorithms

```python
from rtlab.btree import BTree
from rtlab.rbtree import RBTree
from rtlab.kmp import kmp_search
from rtlab.palindrome import count_palindromes, longest_palindrome
from rtlab.sum_of_n import three_sum

tree = BTree(2)
for key in (5, 1, 9, 3):
    tree.insert(key)
tree.delete(1)
print(tree.keys(), 3 in tree)
print(tree.format())

rb = RBTree()
for key in (10, 20, 30):
    rb.insert(key)
print(rb.inorder(), rb.minimum(), rb.maximum())

print(kmp_search("hello world", "world"))
print(count_palindromes("abba"), longest_palindrome("babad"))
print(three_sum([-1, 0, 1, 2, -1, -4]))
```

- `rtlab.btree.BTree(t)`: distinct keys, minimum degree `t` (at least 2).
  `insert` returns `False` for a key already present; `delete` raises
  `KeyError` for a missing key; `search` returns the `BTreeNode` holding a
  key or `None`; `keys()` lists keys in order; `format()` returns a
  level-by-level text picture of the tree.
- `rtlab.rbtree.RBTree`: keeps equal keys (they go to the right). `insert`
  returns the new `RBNode`; `search` and `iterative_search` find a node;
  `successor` and `predecessor` step between nodes; `minimum` and `maximum`
  return `None` on an empty tree; `preorder`, `inorder` and `postorder`
  return key lists.
- `rtlab.kmp`: `build_next` (the failure table) and `kmp_search`, which
  returns the first index of the pattern or -1.
- `rtlab.palindrome`: `count_palindromes`, `count_palindromes_dp`,
  `longest_palindrome`, `longest_palindrome_dp` and
  `longest_palindromic_subsequence`.
- `rtlab.sum_of_n`: `two_sum`, `three_sum`, `three_sum_closest` and
  `four_sum`.
- `rtlab.tree_algorithms`: works on `TreeNode` and `LinkedTreeNode` trees.
  It provides level-order and zigzag traversal, iterative pre-, in- and
  post-order traversal, path sums, depth, node and leaf counts, tree copying,
  symmetry checks, checking a postorder sequence against a search tree,
  conversion of a search tree to a sorted doubly linked list, the inorder
  successor of a node with a parent link, and pre-order threaded trees
  (`build_threaded_tree`, `preorder_threading`, `threaded_preorder`).

## What it does not do

- `RBTree` has no removal: keys can be inserted and looked up, but not
  deleted.
- The renderer only knows spheres and the three materials above, renders on
  a single thread, and writes only plain-text PPM images.