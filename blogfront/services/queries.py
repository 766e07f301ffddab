"""GraphQL documents sent to the WordPress (WPGraphQL) endpoint."""

POSTS_QUERY = """
query GetBlogPosts($first: Int!, $after: String) {
  posts(first: $first, after: $after) {
    nodes {
      id
      databaseId
      title
      slug
      date
      excerpt
      featuredImage {
        node {
          sourceUrl
        }
      }
      categories {
        nodes {
          name
        }
      }
      author {
        node {
          name
        }
      }
    }
    pageInfo {
      hasNextPage
      endCursor
    }
  }
}
"""

# Slug-only projection used when enumerating every post for static generation
POST_SLUGS_QUERY = """
query GetAllPostSlugs($first: Int!, $after: String) {
  posts(first: $first, after: $after) {
    nodes {
      slug
    }
    pageInfo {
      hasNextPage
      endCursor
    }
  }
}
"""

POST_BY_SLUG_QUERY = """
query GetPostBySlug($slug: ID!) {
  post(id: $slug, idType: SLUG) {
    id
    databaseId
    title
    slug
    date
    excerpt
    content
    featuredImage {
      node {
        sourceUrl
      }
    }
    categories {
      nodes {
        name
      }
    }
    author {
      node {
        name
        description
      }
    }
  }
}
"""
