from rmq_queue_activity import ProbeConfig, QueueActivityProbe, Status

config = ProbeConfig(
    queues=("orders", "invoices"),
    host="localhost",
    port=15672,
    user="guest",
    password="guest",
    warn=250,
    critical=500,
    verbose=True,
    log_filename="rmq_queue_activity.log",
)

probe = QueueActivityProbe(config)

# Fetch and evaluate separately to look at the raw rates
records = probe.fetch_queues()
for record in records:
    if record.name in config.queues:
        print(f"{record.name}: in={record.avg_ingress_rate} out={record.avg_egress_rate}")

verdict = probe.evaluate(records)
print(f"Verdict: {verdict.status.name} {verdict.summary}")

# Same thing in one call, with fetch failures folded into a warning
verdict = probe.check()
if verdict.status is not Status.OK:
    print(f"Attention needed: {verdict.summary}")
