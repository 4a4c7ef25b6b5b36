"""相似度启发式函数。

每个函数接收两个已归一化的字符串（target 为字段值，search 为搜索词），
返回 [0, 1] 区间的分数或布尔值。函数之间相互独立，只在聚合阶段取最大值组合。
"""

CONTINUOUS_RUN_WEIGHT = 0.7
CONTINUOUS_LENGTH_WEIGHT = 0.3
IDEOGRAPHIC_MATCH_WEIGHT = 0.8
IDEOGRAPHIC_ORDER_WEIGHT = 0.2


def exact_match(target: str, search: str) -> bool:
    """检查是否精确匹配。"""
    return target == search


def prefix_match(target: str, search: str) -> bool:
    """检查任一字符串是否为另一字符串的前缀。"""
    return target.startswith(search) or search.startswith(target)


def contains_match(target: str, search: str) -> bool:
    """检查任一字符串是否包含另一字符串。"""
    return search in target or target in search


def substring_ratio(target: str, search: str) -> float:
    """计算子串匹配分数。

    若一方是另一方的子串，返回短串长度与长串长度之比。

    Args:
        target: 目标字符串
        search: 搜索字符串

    Returns:
        匹配分数 [0, 1]
    """
    if not target or not search:
        return 0.0

    if search in target:
        return len(search) / len(target)
    if target in search:
        return len(target) / len(search)
    return 0.0


def common_prefix_ratio(target: str, search: str) -> float:
    """计算共同前缀分数。

    共同前缀长度除以两者中较长的长度。

    Args:
        target: 目标字符串
        search: 搜索字符串

    Returns:
        匹配分数 [0, 1]
    """
    if not target or not search:
        return 0.0

    common = 0
    for a, b in zip(target, search):
        if a != b:
            break
        common += 1

    if common == 0:
        return 0.0
    return common / max(len(target), len(search))


def continuous_run(target: str, search: str) -> float:
    """计算连续字符匹配分数。

    在 target 的每个可对齐位置上，统计 search 从首字符起连续命中的长度，
    取其中最长者。连续命中越长分数越高。

    Args:
        target: 目标字符串
        search: 搜索字符串

    Returns:
        匹配分数 [0, 1]；search 比 target 长时没有可对齐位置，返回 0
    """
    if not target or not search:
        return 0.0

    search_len = len(search)
    longest = 0
    for offset in range(len(target) - search_len + 1):
        run = 0
        for j in range(search_len):
            if target[offset + j] != search[j]:
                break
            run += 1
        if run > longest:
            longest = run
            if longest == search_len:
                break

    if longest == 0:
        return 0.0

    run_ratio = longest / search_len
    length_ratio = longest / max(len(target), search_len)
    return run_ratio * CONTINUOUS_RUN_WEIGHT + length_ratio * CONTINUOUS_LENGTH_WEIGHT


def char_set_jaccard(target: str, search: str) -> float:
    """计算字符集合的 Jaccard 相似度（按去重后的字符集合）。"""
    if not target or not search:
        return 0.0
    if target == search:
        return 1.0

    target_chars = set(target)
    search_chars = set(search)
    intersection = len(target_chars & search_chars)
    union = len(target_chars) + len(search_chars) - intersection
    return intersection / union if union else 0.0


def length_ratio(target: str, search: str) -> float:
    """计算长度相似度：较短长度除以较长长度。"""
    len1 = len(target)
    len2 = len(search)

    if len1 == 0 and len2 == 0:
        return 1.0
    if len1 == 0 or len2 == 0:
        return 0.0
    return min(len1, len2) / max(len1, len2)


def ideographic_overlap(target: str, search: str) -> float:
    """计算中文词组匹配分数。

    中文没有空格分词，这里逐字判断 search 中的字符是否出现在 target 中，
    再根据命中字符在 target 中的先后顺序给予顺序奖励。

    Args:
        target: 目标字符串
        search: 搜索字符串

    Returns:
        匹配分数 [0, 1]
    """
    if not target or not search:
        return 0.0

    # 每个字符在 target 中首次出现的位置
    first_index: dict[str, int] = {}
    for index, char in enumerate(target):
        first_index.setdefault(char, index)

    total = len(search)
    matched = sum(1 for char in search if char in first_index)
    if matched == 0:
        return 0.0

    ordered = 0
    previous = -1
    for i, char in enumerate(search):
        index = first_index.get(char, -1)
        if index != -1 and (i == 0 or index > previous):
            ordered += 1
        previous = index

    match_ratio = matched / total
    order_bonus = ordered / total
    return match_ratio * IDEOGRAPHIC_MATCH_WEIGHT + order_bonus * IDEOGRAPHIC_ORDER_WEIGHT


def count_word_matches(target_words: list[str], search_words: list[str]) -> int:
    """统计与字段词互相包含的搜索词个数。"""
    if not target_words or not search_words:
        return 0
    return sum(
        1
        for search_word in search_words
        if any(
            search_word in target_word or target_word in search_word
            for target_word in target_words
        )
    )


def word_boundary_ratio(target_words: list[str], search_words: list[str]) -> float:
    """计算词边界匹配比例：命中的搜索词数 / 搜索词总数。"""
    if not target_words or not search_words:
        return 0.0
    return count_word_matches(target_words, search_words) / len(search_words)
