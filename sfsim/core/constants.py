import math
import numpy as np

# 标量精度：所有向量分量以单精度浮点存储
FLOAT_DTYPE = np.float32
FLT_EPSILON = float(np.finfo(FLOAT_DTYPE).eps)

PI = math.pi
TWO_PI = 2.0 * math.pi
