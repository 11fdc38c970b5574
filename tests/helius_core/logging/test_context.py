"""Tests for helius_core.logging.context module."""

import asyncio

from helius_core.logging.context import (
    clear_log_context,
    get_log_context,
    set_log_context,
)


class TestLogContext:
    def setup_method(self):
        clear_log_context()

    def teardown_method(self):
        clear_log_context()

    def test_defaults_are_empty(self):
        assert get_log_context() == {"operation": "", "trace_id": "", "client_id": ""}

    def test_set_all_fields(self):
        set_log_context(operation="getAsset", trace_id="t1", client_id="mainnet")
        assert get_log_context() == {
            "operation": "getAsset",
            "trace_id": "t1",
            "client_id": "mainnet",
        }

    def test_partial_update_keeps_other_fields(self):
        set_log_context(operation="getAsset", trace_id="t1")
        set_log_context(trace_id="t2")
        ctx = get_log_context()
        assert ctx["operation"] == "getAsset"
        assert ctx["trace_id"] == "t2"

    def test_clear(self):
        set_log_context(operation="getAsset")
        clear_log_context()
        assert get_log_context()["operation"] == ""

    def test_isolated_between_tasks(self):
        async def worker(name):
            set_log_context(operation=name)
            await asyncio.sleep(0)
            return get_log_context()["operation"]

        async def main():
            return await asyncio.gather(worker("getAsset"), worker("createWebhook"))

        assert asyncio.run(main()) == ["getAsset", "createWebhook"]
