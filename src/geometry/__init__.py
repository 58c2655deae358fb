from geometry.hittable import Hittable, HitRecord
from geometry.sphere import Sphere
from geometry.rectangle import AxisAlignedRectangle, RectangleXY, RectangleXZ, RectangleYZ
from geometry.cuboid import RectangularCuboid
from geometry.transform import Translate, RotateY
from geometry.bvh import BVHNode
from geometry.world import HittableList
