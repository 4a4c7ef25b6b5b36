"""编辑距离（Levenshtein 距离）计算。

bounded_edit_distance 在确认距离超过阈值后提前退出，
超过阈值时的返回值只表示“过远”，不代表真实距离。
"""

from rapidfuzz.distance import Levenshtein


def bounded_edit_distance(str1: str, str2: str, max_distance: int = 10) -> int:
    """带提前退出的编辑距离。

    使用两行滚动数组，空间复杂度 O(len(str2))。

    Args:
        str1: 字符串1
        str2: 字符串2
        max_distance: 允许的最大编辑距离

    Returns:
        真实编辑距离；若已确定超过 max_distance，返回 max_distance + 1
    """
    too_far = max_distance + 1
    len1 = len(str1)
    len2 = len(str2)

    if abs(len1 - len2) > max_distance:
        return too_far

    prev = list(range(len2 + 1))
    curr = [0] * (len2 + 1)

    for i in range(1, len1 + 1):
        curr[0] = i
        char1 = str1[i - 1]
        for j in range(1, len2 + 1):
            if char1 == str2[j - 1]:
                curr[j] = prev[j - 1]
            else:
                curr[j] = min(
                    prev[j - 1] + 1,  # 替换
                    curr[j - 1] + 1,  # 插入
                    prev[j] + 1,  # 删除
                )

        if min(curr) > max_distance:
            return too_far

        prev, curr = curr, prev

    return min(prev[len2], too_far)


def edit_distance(str1: str, str2: str) -> int:
    """不设上限的编辑距离。"""
    return Levenshtein.distance(str1, str2)


def edit_similarity(str1: str, str2: str, distance: int) -> float:
    """将编辑距离换算为 [0, 1] 的相似度。"""
    max_length = max(len(str1), len(str2))
    if max_length == 0:
        return 0.0
    return (max_length - distance) / max_length
