"""Loader 提供者工厂。

职责：
1) 维护 provider 注册表（SourceType -> 类）。
2) 按来源类型创建具体 loader 实例。
3) 在来源类型未注册时给出清晰的报错信息。
"""

from __future__ import annotations

from typing import Any

from dataloader.core.settings import Settings
from dataloader.core.types import SourceType
from dataloader.libs.loader.base_loader import BaseLoader


class LoaderFactory:
    """基于注册表的 Loader 工厂。"""

    _PROVIDERS: dict[SourceType, type[BaseLoader]] = {}

    @classmethod
    def register_provider(
        cls,
        source_type: SourceType | str,
        provider_class: type[BaseLoader],
    ) -> None:
        """注册 loader 实现类。

        参数说明：
        - source_type: 来源类型（如 `csv`），必须是 SourceType 中的取值。
        - provider_class: loader 类，必须继承 BaseLoader。
        """

        member = SourceType.parse(source_type)

        if not isinstance(provider_class, type) or not issubclass(provider_class, BaseLoader):
            raise ValueError("Provider class must inherit from BaseLoader")

        cls._PROVIDERS[member] = provider_class

    @classmethod
    def create(
        cls,
        source_type: SourceType | str,
        settings: Settings | None = None,
        **overrides: Any,
    ) -> BaseLoader:
        """根据来源类型创建 loader 实例。

        参数说明：
        - source_type: 来源类型。
        - settings: 全局配置对象（可选）。
        - **overrides: 单次覆盖构造参数（常用于注入测试替身）。
        """

        member = SourceType.parse(source_type)

        loader_class = cls._PROVIDERS.get(member)
        if loader_class is None:
            available_providers = cls.list_providers()
            available_text = ", ".join(available_providers) if available_providers else "none"
            raise ValueError(
                f"No loader registered for source type: '{member.value}'. "
                f"Available providers: {available_text}"
            )

        return loader_class(settings, **overrides)

    @classmethod
    def list_providers(cls) -> list[str]:
        """返回已注册的来源类型（字母序）。"""

        return sorted(member.value for member in cls._PROVIDERS)
