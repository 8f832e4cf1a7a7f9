"""
Textos para compartir y mostrar un MatchResult.
"""

from qixi_match.matching import category_display_name, match_level_badge
from qixi_match.models import MatchResult


def build_result_summary(result: MatchResult, user1_name: str, user2_name: str) -> str:
    """Resumen multilínea del resultado, para compartir."""
    lines = [
        f"💕 {user1_name} & {user2_name} 的七夕匹配结果",
        "",
        f"匹配度：{result.overall_score}%",
        f"匹配等级：{match_level_badge(result.overall_score)}",
        "",
        f"共同兴趣：{len(result.common_interests)}个",
        f"推荐活动：{len(result.recommended_activities)}个",
    ]
    return "\n".join(lines)


def describe_category_scores(result: MatchResult) -> list[str]:
    """Una línea por categoría, con su nombre para mostrar."""
    return [
        f"{category_display_name(category)}：{score}%"
        for category, score in result.category_scores.as_dict().items()
    ]
