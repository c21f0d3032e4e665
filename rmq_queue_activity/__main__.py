from rmq_queue_activity.cli import main

main()
