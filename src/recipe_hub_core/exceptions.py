# src/recipe_hub_core/exceptions.py
"""
本模块定义了 Recipe-Hub 项目中所有自定义的、语义化的异常类型。

使用自定义异常可以使错误处理更加精确和清晰，方便上层调用者根据
不同的错误类型执行不同的处理逻辑。
"""


class RecipeHubError(Exception):
    """
    所有 Recipe-Hub 自定义异常的通用基类。
    捕获此异常可以处理所有源自本项目的预期错误。
    """


class ConfigValidationError(RecipeHubError):
    """
    表示在加载或验证环境配置时发生的错误。
    例如，必填变量缺失，或端口无法转换为正整数。启动阶段致命，不可恢复。
    """


class MissingConfigError(RecipeHubError, KeyError):
    """
    表示按键读取配置时，该键不存在且调用方未提供默认值。
    继承自 KeyError 是为了保持与字典查找行为的一致性。
    """


class BackendConnectionError(RecipeHubError, ConnectionError):
    """
    表示建立数据库或消息代理连接失败。
    继承自内置 ConnectionError，原始异常通过 __cause__ 保留。没有自动重试。
    """


class NotInitializedError(RecipeHubError, RuntimeError):
    """
    表示在对象完成初始化之前就访问了它（例如连接未建立时获取客户端）。
    这是调用顺序错误，正常启动流程下不应出现。
    """


class EntityNotFoundError(RecipeHubError, KeyError):
    """表示要修改的实体（如食谱）不存在。"""


class DuplicateEntityError(RecipeHubError):
    """表示写入违反了唯一性约束（如邮箱已被其他用户使用）。"""
