from faker import Faker

from load_data import load_request_object

fake = Faker()


def get_new_random_article():
    """Canonical POST-article body with a random title, description and body."""
    article_request = load_request_object("articles", "POST-article")
    article_request["article"]["title"] = fake.sentence(nb_words=5)
    article_request["article"]["description"] = fake.sentence(nb_words=3)
    article_request["article"]["body"] = fake.paragraph(nb_sentences=8)
    return article_request


def get_new_user(username: str):
    user_request = load_request_object("users", "POST-user")
    user_request["user"]["username"] = username
    return user_request
