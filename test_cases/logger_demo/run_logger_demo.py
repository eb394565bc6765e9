import queue
import time

from simply_logger import Logger, LogLevel, MemorySink, QueueSink


def main():
    logger = Logger().initialize("logger-demo")

    # Console output through the default sink
    logger.log_info("demo", "main()", "Demo started", task="STARTUP")

    orders = logger.create_module_logger("orders")
    submit = orders.create_fn_logger("submit()")

    entry = submit.build_log_entry(LogLevel.INFORMATIONAL, "Order submitted", task="SUBMIT")
    time.sleep(0.05)
    submit.log_with_duration(entry)

    try:
        {}["order_id"]
    except KeyError as e:
        submit.log_error(e)

    # A second initialize keeps the first name and warns
    logger.initialize("other-name")

    # Route entries into memory for inspection
    memory = MemorySink()
    logger.set_output_sink(memory)
    orders.log_debug("cancel()", "Order cancelled")
    print("[Memory]", [e.to_dict() for e in memory.entries])

    # Hand entries to a consumer queue, e.g. a GUI thread
    gui_queue = queue.Queue()
    logger.set_output_sink(QueueSink(gui_queue))
    orders.log_warning("refund()", "Refund pending approval")
    print("[Queue]", gui_queue.get_nowait())

    logger.set_output_sink(None)
    logger.log_info("demo", "main()", "Demo finished")


if __name__ == "__main__":
    main()
