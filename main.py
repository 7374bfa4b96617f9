import sys
from sfsim.utils.vectors import Vector2, Vector3, cross, det, get_cos, normalize


def steering_report(name, position, heading, goal, neighbor):
    # 期望方向：指向目标
    to_goal = goal - position
    desired = to_goal.normalized()

    # 排斥方向：远离邻居，沿左法向偏移
    away = position - neighbor
    lateral = desired.left_normal()
    side = "left" if det(heading, away) > 0 else "right"

    print(f"{name}: position={position}, goal={goal}, distance={abs(to_goal):.2f}")
    print(f"  heading={heading}, desired={desired}, turn={heading.angle_to(desired):.3f} rad")
    print(f"  cos(heading, desired)={get_cos(heading, desired):.3f}")
    print(f"  neighbor on the {side}, lateral offset direction={lateral}")


def main():
    steering_report(
        "agent_0",
        position=Vector2(0, 0),
        heading=Vector2(1, 0),
        goal=Vector2(3, 4),
        neighbor=Vector2(1, -1),
    )
    steering_report(
        "agent_1",
        position=Vector2(5, 5),
        heading=Vector2(0, -1),
        goal=Vector2(5, 5),
        neighbor=Vector2(4, 6),
    )

    # 墙面法向：两条边的叉积
    edge_a = Vector3(1, 0, 0)
    edge_b = Vector3(0, 1, 0)
    print(f"wall normal={normalize(cross(edge_a, edge_b))}")

    sys.exit()

if __name__ == "__main__":
    main()
