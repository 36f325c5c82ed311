from functools import lru_cache
from typing import Any, Literal

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from billing_backend.core.path_conf import BASE_PATH


class Settings(BaseSettings):
    """全局配置"""

    model_config = SettingsConfigDict(
        env_file=f'{BASE_PATH}/.env',
        env_file_encoding='utf-8',
        extra='ignore',
        case_sensitive=True,
    )

    # Billing errors
    BILLING_CURRENCY_MISMATCH_CODE: str = 'currencies_does_not_match'
    BILLING_TRANSPORT_FAILURE_MESSAGE: str = 'Unable to reach the billing service'

    # Plan catalog
    BILLING_PLAN_PAGE_SIZE: int = 100
    BILLING_PLAN_MAX_PAGES: int = 50

    # Billing anchors
    BILLING_WEEK_START: Literal[
        'monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday'
    ] = 'monday'

    @model_validator(mode='before')
    @classmethod
    def check_env(cls, values: Any) -> Any:
        """检查环境变量"""
        if isinstance(values, dict) and isinstance(values.get('BILLING_WEEK_START'), str):
            values['BILLING_WEEK_START'] = values['BILLING_WEEK_START'].strip().lower()
        return values

    @model_validator(mode='after')
    def check_paging(self) -> 'Settings':
        if self.BILLING_PLAN_PAGE_SIZE < 1:
            raise ValueError('BILLING_PLAN_PAGE_SIZE must be positive')
        if self.BILLING_PLAN_MAX_PAGES < 1:
            raise ValueError('BILLING_PLAN_MAX_PAGES must be positive')
        return self


@lru_cache
def get_settings() -> Settings:
    """获取全局配置单例"""
    return Settings()


# 创建全局配置实例
settings = get_settings()
