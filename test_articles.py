import pytest

from data_generator import fake, get_new_random_article

pytestmark = pytest.mark.live

FIRST_PAGE = {"limit": 10, "offset": 0}


def test_get_articles(api, expect):
    articles_response = api.path("/articles").params(FIRST_PAGE).get_request(200)

    expect(articles_response).should_match_schema("articles", "GET_articles")
    expect(len(articles_response["articles"])).should_be_less_than_or_equal(10)
    expect(articles_response["articlesCount"]).should_equal(10)


def test_create_and_delete_article(api, expect):
    article_request = get_new_random_article()
    title = article_request["article"]["title"]

    create_response = api.path("/articles").body(article_request).post_request(201)
    expect(create_response).should_match_schema("articles", "POST_articles")
    expect(create_response["article"]["title"]).should_equal(title)
    slug = create_response["article"]["slug"]
    assert slug

    articles_response = api.path("/articles").params(FIRST_PAGE).get_request(200)
    expect(articles_response).should_match_schema("articles", "GET_articles")
    expect(articles_response["articles"][0]["title"]).should_equal(title)

    api.path(f"/articles/{slug}").delete_request(204)

    after_delete = api.path("/articles").params(FIRST_PAGE).get_request(200)
    expect(after_delete).should_match_schema("articles", "GET_articles")
    expect(after_delete["articles"][0]["title"]).not_.should_equal(title)


def test_create_update_and_delete_article(api, expect):
    article_request = get_new_random_article()
    title = article_request["article"]["title"]

    create_response = api.path("/articles").body(article_request).post_request(201)
    expect(create_response["article"]["title"]).should_equal(title)
    slug = create_response["article"]["slug"]

    updated_title = fake.sentence(nb_words=5)
    article_request["article"]["title"] = updated_title
    update_response = api.path(f"/articles/{slug}").body(article_request).put_request(200)
    expect(update_response).should_match_schema("articles", "PUT_articles")
    expect(update_response["article"]["title"]).should_equal(updated_title)
    updated_slug = update_response["article"]["slug"]

    articles_response = api.path("/articles").params(FIRST_PAGE).get_request(200)
    expect(articles_response["articles"][0]["title"]).should_equal(updated_title)

    api.path(f"/articles/{updated_slug}").delete_request(204)

    after_delete = api.path("/articles").params(FIRST_PAGE).get_request(200)
    expect(after_delete["articles"][0]["title"]).not_.should_equal(updated_title)
