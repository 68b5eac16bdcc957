"""配置常量和环境变量加载"""

import os

# 日志
LOGGER_NAME = "chaining-assertion"

# 模糊匹配配置
FUZZY_MATCH_THRESHOLD = float(
    os.getenv("CHAINING_ASSERTION_FUZZY_THRESHOLD", "0.8")
)  # 成员名模糊匹配阈值
MAX_SUGGESTIONS = 3  # "did you mean" 最多给出的候选数

# 失败消息中 repr 的最大长度
MAX_REPR_LENGTH = 80
