"""Prompt do resumo de perfil (LinkedIn/Facebook) com busca na web."""

from __future__ import annotations

PROFILE_SUMMARY_SYSTEM = (
    "你是一個嚴格的資料提取機器人。只輸出請求的資訊，完全不包含任何對話、問候或自我描述的語句。"
)

PROFILE_SUMMARY_USER_TEMPLATE = """請針對以下個人檔案連結（LinkedIn 或 Facebook）進行深入研究，並撰寫一份精簡的「人物側寫」：{profile_url}

請善用搜尋工具查找公開資訊，直接依據以下包含的面向進行摘要說明：
1. **工作經歷**：目前的職位與主要職涯歷程。
2. **學校經歷**：學歷背景與畢業學校。
3. **專長**：專業技能、領域知識與核心競爭力。
4. **工作過的公司**：曾經任職過的主要公司或組織名稱。
5. **其他個人資訊 (若為 Facebook)**：若連結為 Facebook，請一併摘要公開的生活動態、興趣、居住地或近期關注議題。

請以條列式呈現。嚴格禁止輸出任何「好的」、「我會為您...」、「以下是...」等開場白或結尾客套話。直接輸出這幾點內容即可。請用繁體中文。"""


def format_profile_summary_prompt(profile_url: str) -> str:
    """Formata prompt com a URL do perfil."""
    return PROFILE_SUMMARY_USER_TEMPLATE.format(profile_url=profile_url.strip())
