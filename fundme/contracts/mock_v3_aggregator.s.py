version_number = Variable()
decimals_value = Variable()
latest_answer = Variable()
latest_timestamp = Variable()
latest_round = Variable()

answers = Hash()
timestamps = Hash()
started_ats = Hash()


@construct
def seed(decimals: int, initial_answer: int):
    version_number.set(0)
    decimals_value.set(decimals)
    latest_round.set(0)
    record_answer(initial_answer)


def record_answer(answer):
    round_id = latest_round.get() + 1

    latest_answer.set(answer)
    latest_timestamp.set(now)
    latest_round.set(round_id)

    answers[round_id] = answer
    timestamps[round_id] = now
    started_ats[round_id] = now


@export
def update_answer(answer: int):
    record_answer(answer)


@export
def update_round_data(round_id: int, answer: int, timestamp: int, started_at: int):
    latest_round.set(round_id)
    latest_answer.set(answer)
    latest_timestamp.set(timestamp)

    answers[round_id] = answer
    timestamps[round_id] = timestamp
    started_ats[round_id] = started_at


@export
def get_round_data(round_id: int):
    return round_id, answers[round_id], started_ats[round_id], timestamps[round_id], round_id


@export
def latest_round_data():
    round_id = latest_round.get()
    return round_id, answers[round_id], started_ats[round_id], timestamps[round_id], round_id


@export
def decimals():
    return decimals_value.get()


@export
def description():
    return 'v0.8/tests/MockV3Aggregator.sol'


@export
def version():
    return version_number.get()
