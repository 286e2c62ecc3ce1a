# Normalization of Pub/Sub event data to the CloudEvent message shape


def normalize_pubsub_data(context, data):
    """Wrap legacy Pub/Sub data as {"message": {...}} with id and publish time.

    The input data is not modified.
    """
    if isinstance(data, dict):
        message = dict(data)
    else:
        message = {"data": data}

    message["messageId"] = context.event_id
    message["publishTime"] = context.timestamp
    return {"message": message}
