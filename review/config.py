MIN_BOX = 1
MAX_BOX = 5
LEITNER_INTERVAL_DAYS = {
    1: 1,    # next day
    2: 3,
    3: 7,
    4: 14,
    5: 30,   # longest
}
CONFUSED_RETEST_BOX = 2   # confused always re-tests on the box-2 interval (3 days)
AGAIN_RETEST_BOX = 1      # again / forgot come back the next day

DEFAULT_QUEUE_LIMIT = 20
MAX_QUEUE_LIMIT = 100
DASHBOARD_TOP_ITEMS = 5
