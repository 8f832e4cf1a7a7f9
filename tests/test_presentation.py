"""Tests de textos de resultado."""

from qixi_match.presentation import build_result_summary, describe_category_scores


def test_result_summary(engine, selection):
    result = engine.compute_match(selection(("movies", 5)), selection(("movies", 5)))
    text = build_result_summary(result, "小明", "小红")

    assert text.splitlines()[0] == "💕 小明 & 小红 的七夕匹配结果"
    assert "匹配度：30%" in text
    assert "匹配等级：需要了解 💝" in text
    assert "共同兴趣：1个" in text
    assert "推荐活动：3个" in text


def test_category_lines(engine, selection):
    result = engine.compute_match(selection("movies"), selection("movies"))
    assert describe_category_scores(result) == [
        "娱乐：100%",
        "运动：0%",
        "美食：0%",
        "旅行：0%",
    ]
