"""Пример использования DCE API клиента."""

import asyncio
import logging

from dceapi import DceApiClientManager, DceApiException, get_dceapi_config
from dceapi.models import QuotesRequest

# Настраиваем логирование
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


async def main() -> None:
    """Основная функция."""
    # Загружаем конфигурацию из config.yml
    config = get_dceapi_config()
    print(f"Подключение к серверу: {config.base_url}")

    # Создаём менеджер API
    manager = await DceApiClientManager.from_config(config)

    try:
        trade_date = await manager.common.get_curr_trade_date()
        print(f"\nТекущий торговый день: {trade_date.date}")

        varieties = await manager.common.get_variety_list()
        print(f"\nТовары ({len(varieties)} шт.):")
        for variety in varieties[:5]:  # Показываем первые 5
            print(f"  - {variety.name} ({variety.code})")

        if varieties:
            quotes = await manager.market.get_day_quotes(
                QuotesRequest(variety_id=varieties[0].code, trade_date=trade_date.date)
            )
            for quote in quotes[:5]:
                print(f"  {quote.contract_id}: {quote.close} (объём {quote.volume})")
    except DceApiException as exc:
        print(f"\nОшибка API: {exc}")

    finally:
        # Закрываем все соединения
        await DceApiClientManager.close_all()
        print("\nСоединения закрыты.")


if __name__ == "__main__":
    asyncio.run(main())
